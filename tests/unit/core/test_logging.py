#!/usr/bin/env python3
"""Tests for logging setup."""

import json
import logging
import os
from unittest.mock import patch

import pytest
from pythonjsonlogger.json import JsonFormatter

from parsexsd.core.logging import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    package = logging.getLogger("parsexsd")
    saved = [(logger, list(logger.handlers), logger.level, logger.propagate) for logger in (root, package)]
    yield root
    for logger, handlers, level, propagate in saved:
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


class TestSetupLogging:
    """Test suite for JSON logging configuration."""

    def test_json_formatter_on_root(self, restore_root_logger):
        """Test that the root logger formats records as JSON."""
        setup_logging("debug")

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_record_is_json(self, restore_root_logger, capsys):
        """Test that log lines on stderr are JSON objects."""
        setup_logging("INFO")
        logging.getLogger("parsexsd.test").info("Loaded schema")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["message"] == "Loaded schema"
        assert payload["levelname"] == "INFO"

    @patch.dict(os.environ, {'PARSEXSD_LOG_LEVEL': 'warning\r\n'})
    def test_level_from_environment(self, restore_root_logger):
        """Test that PARSEXSD_LOG_LEVEL is used when no level is given."""
        setup_logging()
        assert restore_root_logger.level == logging.WARNING
