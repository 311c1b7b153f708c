"""
structlog configuration shared by the API and CLI entry points.
"""
import logging
import sys
from typing import Optional

import structlog

from .config import LogConfig, LogFormat


def configure_logging(config: Optional[LogConfig] = None) -> None:
    config = config or LogConfig()
    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        level = logging.INFO

    if config.format == LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    # stdout is reserved for command output
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
