"""CLI entry point for the Student Records service."""

from __future__ import annotations

import sys
from dataclasses import replace

import click
import uvicorn

from student_records import __version__
from student_records.config import VALID_LOG_LEVELS, Settings
from student_records.exceptions import ConfigError
from student_records.logging import setup_logging

APP_FACTORY = "student_records.api.app:create_app"


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Student Records - CRUD service for student records."""
    pass


@main.command()
@click.option("--host", default=None, help="Interface to bind (default: STUDENT_RECORDS_HOST).")
@click.option(
    "--port", type=int, default=None, help="Port to listen on (default: STUDENT_RECORDS_PORT)."
)
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default: STUDENT_RECORDS_LOG_LEVEL).",
)
@click.option("--reload", is_flag=True, help="Restart on code changes (development only).")
def serve(host: str | None, port: int | None, log_level: str | None, reload: bool) -> None:
    """Run the HTTP API."""
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    if log_level:
        settings = replace(settings, log_level=log_level.upper())
    logger = setup_logging(settings)
    logger.info(
        "Starting Student Records %s on %s:%d",
        __version__,
        host or settings.host,
        port or settings.port,
    )

    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
        reload=reload,
    )


if __name__ == "__main__":
    main()
