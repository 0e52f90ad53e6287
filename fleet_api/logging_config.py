"""
Logging setup for the Fleet Management API.

Console output is kept short; the rotating file under ``log_dir`` carries
full timestamps.
"""
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from fleet_api.config import Settings

CONSOLE_FORMAT = "[%(asctime)s %(levelname).3s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname).3s] %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging for the application."""
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))

    file_handler = TimedRotatingFileHandler(
        log_dir / "fleet-management.log",
        when="midnight",
        backupCount=14,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=[console_handler, file_handler],
        force=True,
    )

    # Requests are logged by the application middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
