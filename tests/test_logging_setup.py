#!/usr/bin/env python3
"""Tests for logging helpers."""

import logging
from io import StringIO

import pytest
from maintlog import logging_setup
from maintlog.logging_setup import (
    LOG_LEVEL_ENV,
    PKG_LOGGER_NAME,
    configure_logging,
    get_logger,
    parse_level,
    resolve_level,
)


@pytest.fixture
def pkg_logger(monkeypatch):
    """Unconfigured package logger, restored after the test."""
    logger = logging.getLogger(PKG_LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    monkeypatch.setattr(logging_setup, "_configured", False)
    logger.handlers = [logging.NullHandler()]
    yield logger
    logger.handlers, level, logger.propagate = saved
    logger.setLevel(level)


class TestParseLevel:
    """Tests for parse_level."""

    def test_int_passthrough(self):
        assert parse_level(logging.DEBUG) == logging.DEBUG

    def test_level_names(self):
        assert parse_level("info") == logging.INFO
        assert parse_level(" ERROR ") == logging.ERROR

    def test_numeric_string(self):
        assert parse_level("15") == 15

    def test_none_uses_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
        assert parse_level(None) == logging.DEBUG

    def test_default_is_warning(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert parse_level(None) == logging.WARNING
        assert parse_level("nonsense") == logging.WARNING

    def test_invalid_environment_ignored(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "bogus")
        assert parse_level(None) == logging.WARNING


class TestResolveLevel:
    """Tests for resolve_level."""

    def test_first_valid_candidate_wins(self):
        assert resolve_level("ERROR", "DEBUG") == logging.ERROR

    def test_skips_missing_and_invalid(self):
        """Unset or misspelled levels fall through to the next candidate."""
        assert resolve_level(None, "bogus", "DEBUG") == logging.DEBUG

    def test_no_valid_candidate(self):
        assert resolve_level(None, "bogus") == logging.WARNING
        assert resolve_level() == logging.WARNING


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_named_child_logger(self):
        logger = get_logger("maintlog.registry")
        assert logger.name == "maintlog.registry"

    def test_package_logger_has_handler(self):
        get_logger("maintlog.export")
        assert logging.getLogger(PKG_LOGGER_NAME).handlers


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_attaches_single_stream_handler(self, pkg_logger):
        stream = StringIO()
        configure_logging("INFO", stream=stream)

        assert len(pkg_logger.handlers) == 1
        handler = pkg_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert not isinstance(handler, logging.NullHandler)
        assert handler.stream is stream
        assert pkg_logger.level == logging.INFO
        assert pkg_logger.propagate is False

    def test_second_call_is_ignored(self, pkg_logger):
        """Only the first configuration takes effect."""
        first = StringIO()
        second = StringIO()
        configure_logging("INFO", stream=first)
        configure_logging("DEBUG", stream=second)

        assert len(pkg_logger.handlers) == 1
        assert pkg_logger.handlers[0].stream is first
        assert pkg_logger.level == logging.INFO

    def test_messages_reach_stream_at_level(self, pkg_logger):
        stream = StringIO()
        configure_logging(logging.INFO, stream=stream)

        logger = get_logger("maintlog.registry")
        logger.info("index created")
        logger.debug("hidden detail")

        output = stream.getvalue()
        assert "maintlog.registry - INFO - index created" in output
        assert "hidden detail" not in output
