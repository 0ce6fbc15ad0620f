"""Logging configuration helpers."""

import logging

LOGGER_NAME = "ticket_purchase"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the package logger once and set its level.

    Repeated calls only update the level, so app factories can call this
    freely without duplicating output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
