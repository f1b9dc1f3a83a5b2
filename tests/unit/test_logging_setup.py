"""
Unit tests for CLI logging configuration.
"""

import io
import logging

import pytest


class TestVerbosity:
    """Test -q / -v mapping."""

    @pytest.mark.parametrize('quiet,verbose,expected', [
        (False, False, 'WARNING'),
        (True, False, 'ERROR'),
        (False, True, 'INFO'),
        (True, True, 'ERROR'),
    ])
    def test_levels(self, quiet, verbose, expected):
        """Quiet means errors only, verbose adds progress messages."""
        from xmltract.logging_setup import verbosity_to_level

        assert verbosity_to_level(quiet, verbose) == expected

    def test_default_from_configuration(self):
        """Without flags the configured default is used."""
        from xmltract.logging_setup import verbosity_to_level

        assert verbosity_to_level(False, False, default='DEBUG') == 'DEBUG'


class TestSetupLogging:
    """Test handler installation on the package logger."""

    def test_writes_formatted_messages(self):
        """Messages from package modules reach the configured stream."""
        from xmltract.logging_setup import setup_logging

        stream = io.StringIO()
        setup_logging('INFO', stream=stream)

        logging.getLogger('xmltract.api.extractor').info("parsing 'doc.xml'")

        line = stream.getvalue()
        assert line.startswith('INFO ')
        assert "xmltract.api.extractor: parsing 'doc.xml'" in line

    def test_level_filters_messages(self):
        """Messages below the level are dropped."""
        from xmltract.logging_setup import setup_logging

        stream = io.StringIO()
        setup_logging('ERROR', stream=stream)

        logger = logging.getLogger('xmltract.parsers.stream')
        logger.warning('dropped')
        logger.error('kept')

        assert 'dropped' not in stream.getvalue()
        assert 'kept' in stream.getvalue()

    def test_repeated_setup_replaces_handler(self):
        """Only the most recent stream receives messages."""
        from xmltract.logging_setup import setup_logging

        first, second = io.StringIO(), io.StringIO()
        setup_logging('INFO', stream=first)
        logger = setup_logging('INFO', stream=second)

        logger.info('hello')

        assert len(logger.handlers) == 1
        assert first.getvalue() == ''
        assert 'hello' in second.getvalue()

    def test_root_logger_untouched(self):
        """Only the package logger is configured."""
        from xmltract.logging_setup import setup_logging

        root_handlers = list(logging.getLogger().handlers)
        setup_logging('INFO', stream=io.StringIO())

        assert logging.getLogger().handlers == root_handlers
