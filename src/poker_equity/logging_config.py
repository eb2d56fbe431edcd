"""
logging_config.py

Logger configuration for the poker equity tools. Library modules only call
get_logger(); handlers are installed by configure_logging() from the CLI.
"""
import logging
from typing import Optional

from poker_equity import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    level = (level or config.LOG_LEVEL).upper()
    log_file = log_file or config.LOG_FILE

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
