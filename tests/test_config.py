"""Tests for configuration.py and the logger level wiring."""

import logging

from moviehash.misc.logger import TRACE_LEVEL, configure, logger
from moviehash.models.configuration import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, Configuration


def test_configuration_default(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert Configuration().log_level == DEFAULT_LOG_LEVEL


def test_configuration_from_env(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert Configuration().log_level == "DEBUG"


def test_configure_sets_level():
    previous = logger.level
    try:
        configure(Configuration(log_level="TRACE"))
        assert logger.level == TRACE_LEVEL
        configure(Configuration(log_level="WARNING"))
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(previous)


def test_configure_unknown_level_falls_back_to_info():
    previous = logger.level
    try:
        configure(Configuration(log_level="CHATTY"))
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(previous)
