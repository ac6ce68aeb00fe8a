import logging

from funclite.logger.logger import get_logger, logger, setup_logger


def test_default_logger():
    assert logger.name == "funclite"
    assert logger.propagate is False
    stdout_handlers = [
        handler
        for handler in logger.handlers
        if type(handler) is logging.StreamHandler
    ]
    assert len(stdout_handlers) == 1


def test_setup_logger_configures_once():
    first = setup_logger("funclite.tests.once", level="warning")
    second = setup_logger("funclite.tests.once", level="debug")

    assert first is second
    assert len([h for h in first.handlers if type(h) is logging.StreamHandler]) == 1
    assert first.level == logging.WARNING


def test_setup_logger_custom_format():
    custom = setup_logger("funclite.tests.format", format_string="%(message)s")
    (handler,) = [h for h in custom.handlers if type(h) is logging.StreamHandler]
    assert handler.formatter._fmt == "%(message)s"


def test_get_logger_returns_package_children():
    assert get_logger("funclite.preconditions").name == "funclite.preconditions"
    assert get_logger("funclite") is logger
    assert get_logger("caller.module").name == "funclite.caller.module"
