"""Unit tests for Settings loading."""

import os
from unittest.mock import patch

import pytest

from student_records.config import Settings
from student_records.exceptions import ConfigError, StudentRecordsError


@pytest.mark.unit
class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        """Unset variables fall back to defaults."""
        settings = Settings.from_env({})

        assert settings == Settings()
        assert settings.host == "127.0.0.1"
        assert settings.port == 8000
        assert settings.api_prefix == "/api"
        assert settings.cors_origins == ["*"]
        assert settings.log_level == "INFO"

    def test_all_overrides(self) -> None:
        """Every field is read from its variable."""
        settings = Settings.from_env(
            {
                "STUDENT_RECORDS_HOST": "0.0.0.0",
                "STUDENT_RECORDS_PORT": "9000",
                "STUDENT_RECORDS_API_PREFIX": "/v1/",
                "STUDENT_RECORDS_CORS_ORIGINS": "https://a.example, https://b.example,",
                "STUDENT_RECORDS_LOG_LEVEL": "debug",
                "STUDENT_RECORDS_LOG_DIR": "/tmp/student-logs",
            }
        )

        assert settings.host == "0.0.0.0"
        assert settings.port == 9000
        assert settings.api_prefix == "/v1"
        assert settings.cors_origins == ["https://a.example", "https://b.example"]
        assert settings.log_level == "DEBUG"
        assert settings.log_dir == "/tmp/student-logs"

    @patch.dict(os.environ, {"STUDENT_RECORDS_PORT": "8123"})
    def test_reads_process_environment(self) -> None:
        """os.environ is used when no mapping is given."""
        assert Settings.from_env().port == 8123

    @pytest.mark.parametrize("port", ["abc", "0", "70000"])
    def test_invalid_port(self, port: str) -> None:
        """Non-numeric or out-of-range ports are rejected."""
        with pytest.raises(ConfigError) as exc_info:
            Settings.from_env({"STUDENT_RECORDS_PORT": port})

        assert "ort" in str(exc_info.value)

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        with pytest.raises(ConfigError, match="Invalid log level"):
            Settings.from_env({"STUDENT_RECORDS_LOG_LEVEL": "LOUD"})

    def test_invalid_api_prefix(self) -> None:
        """Prefix must be absolute."""
        with pytest.raises(ConfigError, match="must start with"):
            Settings.from_env({"STUDENT_RECORDS_API_PREFIX": "api"})

    def test_config_error_is_package_error(self) -> None:
        """ConfigError shares the package base exception."""
        assert issubclass(ConfigError, StudentRecordsError)
