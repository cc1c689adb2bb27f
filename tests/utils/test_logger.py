"""Tests for the logging helpers."""

import logging

from csvcraft_utils.utils.logger import LoggerUtility, configure_logger


def test_configure_logger_returns_named_logger():
    logger = configure_logger('csvcraft_utils.tests')

    assert logger.name == 'csvcraft_utils.tests'
    assert logger.level == logging.INFO


def test_terminal_errors_are_warnings(caplog):
    utility = LoggerUtility('csvcraft_utils.tests.terminal')

    with caplog.at_level(logging.DEBUG, logger='csvcraft_utils.tests.terminal'):
        utility.log_validation_error('too_many_errors', 'Too many errors were found')

    assert caplog.records[-1].levelno == logging.WARNING
    assert caplog.records[-1].getMessage() == '[too_many_errors] Too many errors were found (at file)'


def test_field_errors_are_debug(caplog):
    utility = LoggerUtility('csvcraft_utils.tests.field')

    with caplog.at_level(logging.DEBUG, logger='csvcraft_utils.tests.field'):
        utility.log_validation_error('missing_field', 'Missing mandatory field', row=4, field='id')

    assert caplog.records[-1].levelno == logging.DEBUG
    assert caplog.records[-1].getMessage() == '[missing_field] Missing mandatory field (at row: 4, field: id)'
