"""Structured logging for the console kernel."""

import logging
import sys
from typing import Optional

import structlog


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure stdlib logging and the structlog processor chain.

    Called by the entry point only; importing the package never touches
    the host application's logging setup.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None):
    """Return a structured logger. Configuration is left to setup_logging()."""
    return structlog.get_logger(name) if name else structlog.get_logger()
