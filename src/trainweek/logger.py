"""Loguru sinks for the API server and the CLI."""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> "
    "<cyan>{name}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} {level: <7} {name}:{line} {message}"


def setup_logger(level: str = "INFO", log_file: str | None = None) -> None:
    """Replace loguru's sinks: stderr always, plus a rotated file if given."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(path, format=FILE_FORMAT, level=level, rotation="10 MB", retention=5)
