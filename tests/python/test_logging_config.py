import logging

import pytest

from nodenet.logging_config import parse_level, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("nodenet")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_replaces_handlers(tmp_path, package_logger):
    log_file = tmp_path / "run.log"
    setup_logging(logging.DEBUG, str(log_file))
    returned = setup_logging(logging.DEBUG, log_file)

    assert returned is package_logger
    assert len(package_logger.handlers) == 2
    assert package_logger.level == logging.DEBUG
    logging.getLogger("nodenet.sim.core.controller").debug("hello")
    for handler in package_logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()


def test_setup_logging_without_file_uses_stdout_only(package_logger):
    setup_logging(logging.WARNING)
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0], logging.StreamHandler)
    assert package_logger.handlers[0].level == logging.WARNING


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level("WARNING") == logging.WARNING
    with pytest.raises(ValueError):
        parse_level("chatty")
