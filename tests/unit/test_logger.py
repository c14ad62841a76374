import logging

from lib.telemetry.logger import configure_logging, get_logger


def test_get_logger_is_namespaced():
    assert get_logger("apps.greeter").name == "greeter.apps.greeter"
    assert get_logger("greeter.main").name == "greeter.main"


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    count = len(logger.handlers)
    configure_logging("warning")
    assert len(logger.handlers) == count
    assert logger.level == logging.WARNING
