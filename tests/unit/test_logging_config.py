"""
Unit tests for logging setup.
"""

import logging

import pytest

from src.core.config import Config
from src.core.logging_config import setup_logging


@pytest.fixture
def fresh_logger():
    name = "basefee_trap_test"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_writes_under_configured_logs_dir(tmp_path, fresh_logger):
    settings = Config(logs_dir=tmp_path / "logs")
    logger = setup_logging(fresh_logger, settings=settings, level="INFO")

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2
    assert (tmp_path / "logs" / f"{fresh_logger}.log").exists()


def test_reconfigure_updates_level_without_new_handlers(tmp_path, fresh_logger):
    settings = Config(logs_dir=tmp_path)
    setup_logging(fresh_logger, settings=settings, level="INFO")
    logger = setup_logging(fresh_logger, settings=settings, level="error")

    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 2
    assert all(h.level == logging.ERROR for h in logger.handlers)
