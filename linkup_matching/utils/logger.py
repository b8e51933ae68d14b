"""Logging configuration"""
import logging
import os
from typing import Union
from rich.logging import RichHandler


def setup_logger(name: str = "linkup_matching", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Setup logger with rich formatting"""
    logger = logging.getLogger(name)
    if isinstance(level, str):
        # unknown names come back as "Level <name>"
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


# Global logger instance
logger = setup_logger(level=os.getenv("LOG_LEVEL", "INFO"))
