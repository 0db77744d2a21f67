"""
Тесты для консольного логирования.
"""
import logging

import pytest

from quiz_ai.infrastructure.logging.console_logger import ROOT_LOGGER_NAME, setup_logging


class TestSetupLogging:
    """Тесты для setup_logging"""

    @pytest.fixture(autouse=True)
    def reset_logger(self):
        """Убирает handler после теста, чтобы не писать в закрытый stdout"""
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        yield
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def test_repeated_setup_keeps_one_handler(self):
        logger = setup_logging("INFO")
        setup_logging("DEBUG")

        assert logger.name == ROOT_LOGGER_NAME
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logging("verbose")

        assert logger.level == logging.INFO
