"""
Tests for logging_config.py
"""

import logging

import pytest

from networking.logging_config import LOGGER_NAME, get_module_logger, setup_logging
from tests.test_helpers import create_test_config


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Leave the package logger as we found it"""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


class TestGetModuleLogger:
    def test_module_logger_is_child_of_package_logger(self):
        logger = get_module_logger("executor")

        assert logger.name == "networking.executor"
        assert logger.parent is logging.getLogger(LOGGER_NAME)


class TestSetupLogging:
    def test_writes_to_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "networking.log"

        setup_logging(log_file=log_file, verbose=False, config_obj=create_test_config())
        get_module_logger("executor").debug("hello from the executor")

        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "networking.executor - DEBUG - hello from the executor" in content

    def test_console_level_from_config(self):
        config_obj = create_test_config(logging={"level": "warning"})

        logger = setup_logging(verbose=True, config_obj=config_obj)

        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING

    def test_repeated_setup_does_not_duplicate_handlers(self):
        config_obj = create_test_config()

        setup_logging(verbose=True, config_obj=config_obj)
        logger = setup_logging(verbose=True, config_obj=config_obj)

        assert len(logger.handlers) == 1

    def test_quiet_without_file_has_no_handlers(self):
        logger = setup_logging(verbose=False, config_obj=create_test_config())

        assert logger.handlers == []
