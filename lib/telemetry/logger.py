"""Logging wiring for the greeter service."""

import logging

ROOT_LOGGER = "greeter"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "info") -> logging.Logger:
    """Attach a single stream handler to the ``greeter`` logger.

    Calling this more than once only updates the level.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper())
    if not any(getattr(h, "_greeter", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._greeter = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
