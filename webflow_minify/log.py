"""Logging setup shared by the CLI and the pipeline."""
import logging
from pathlib import Path
from typing import Optional

from webflow_minify.settings import Settings

LOGGER_NAME = "webflow_minify"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: Optional[str] = None, log_to_file: Optional[bool] = None
) -> logging.Logger:
    """Configure the package logger and return it.

    Console output goes to stderr with the bare message so labelled
    diagnostics read the same as printed ones. When ``log_to_file`` is
    enabled every record is also appended to ``Settings.LOG_FILE_ROOT``.
    Repeated calls replace the handlers instead of stacking them.
    """
    level = level or Settings.LOG_LEVEL
    if log_to_file is None:
        log_to_file = Settings.LOG_TO_FILE

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    if log_to_file:
        Path(Settings.LOG_FOLDER_ROOT).mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Settings.LOG_FILE_ROOT, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.debug("Logging configured (level=%s, file=%s)", level, log_to_file)
    return logger
