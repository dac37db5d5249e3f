"""Tests for logging setup."""

import logging

from stockflow.infrastructure.logging_config import LOG_FORMAT, configure_logging


def _own_handlers(logger):
    return [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler)
        and h.formatter is not None
        and h.formatter._fmt == LOG_FORMAT
    ]


class TestConfigureLogging:

    def test_sets_level(self):
        logger = configure_logging("debug")
        assert logger.name == "stockflow"
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        assert configure_logging("chatty").level == logging.WARNING

    def test_repeat_calls_keep_one_handler(self):
        configure_logging("INFO")
        logger = configure_logging("INFO")
        assert len(_own_handlers(logger)) == 1

    def test_repeat_call_replaces_handler(self):
        first = _own_handlers(configure_logging("INFO"))[0]
        logger = configure_logging("DEBUG")
        assert first not in logger.handlers
        assert len(_own_handlers(logger)) == 1

    def test_leaves_other_handlers_alone(self):
        logger = logging.getLogger("stockflow")
        other = logging.NullHandler()
        logger.addHandler(other)
        try:
            configure_logging("INFO")
            configure_logging("INFO")
            assert other in logger.handlers
        finally:
            logger.removeHandler(other)
