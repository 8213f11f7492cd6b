"""Structured logging configuration."""

import logging
import sys
from typing import Any

LOGGER_NAME = "skatefit"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure structured logging for the package."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    # Format: timestamp - level - module - message
    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


# Package logger; handlers are attached by setup_logging()
logger = logging.getLogger(LOGGER_NAME)


def log_recommendation(style: str, deck_width: float, **kwargs: Any) -> None:
    """Log a computed recommendation."""
    extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
    logger.info(
        f"RECOMMEND style={style} deck_width={deck_width} {extra}".strip()
    )


def log_incomplete(missing: tuple[str, ...]) -> None:
    """Log a profile that could not be computed."""
    logger.debug(
        f"INCOMPLETE missing={','.join(missing) or '-'}"
    )
