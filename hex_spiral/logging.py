"""Structured logging for hex-spiral, scoped to the ``hex_spiral`` stdlib logger."""

import logging

import structlog
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import add_logger_name, filter_by_level

ROOT_LOGGER = "hex_spiral"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def configure_logging(log_level: str = "WARNING"):
    """Set the level of the ``hex_spiral`` logger; the host's root logger is left alone."""
    logging.getLogger(ROOT_LOGGER).setLevel(log_level)


def get_logger(name: str):
    """Get a structured logger bound to the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            filter_by_level,
            add_log_level,
            add_logger_name,
            TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
