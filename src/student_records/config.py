"""Runtime configuration loaded from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from student_records.exceptions import ConfigError

ENV_PREFIX = "STUDENT_RECORDS_"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Service settings.

    Every field can be overridden with a ``STUDENT_RECORDS_<FIELD>`` environment
    variable, e.g. ``STUDENT_RECORDS_PORT=9000``.
    """

    host: str = "127.0.0.1"
    port: int = 8000
    api_prefix: str = "/api"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_dir: str = "logs"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Create settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Parsed settings, with defaults for unset variables.

        Raises:
            ConfigError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str, default: str) -> str:
            return env.get(f"{ENV_PREFIX}{name}", default)

        raw_port = get("PORT", str(defaults.port))
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigError(f"Invalid port: {raw_port!r}") from e
        if not 0 < port < 65536:
            raise ConfigError(f"Port out of range: {port}")

        log_level = get("LOG_LEVEL", defaults.log_level).upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level: {log_level!r} (expected one of {', '.join(VALID_LOG_LEVELS)})"
            )

        api_prefix = get("API_PREFIX", defaults.api_prefix).rstrip("/")
        if api_prefix and not api_prefix.startswith("/"):
            raise ConfigError(f"API prefix must start with '/': {api_prefix!r}")

        raw_origins = env.get(f"{ENV_PREFIX}CORS_ORIGINS")
        if raw_origins is None:
            cors_origins = defaults.cors_origins
        else:
            cors_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]

        return cls(
            host=get("HOST", defaults.host),
            port=port,
            api_prefix=api_prefix,
            cors_origins=cors_origins,
            log_level=log_level,
            log_dir=get("LOG_DIR", defaults.log_dir),
        )
