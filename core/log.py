from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name} | {message}"


def configure_logging(level: str = "INFO", sink=sys.stderr) -> None:
    """Replace loguru's default handler with a single formatted one."""
    logger.remove()
    logger.add(sink, level=level.upper(), format=LOG_FORMAT, backtrace=False, diagnose=False)
