"""Logging utilities for csvcraft-utils."""

import logging
from typing import Optional


TERMINAL_ERROR_TYPES = frozenset({'invalid_encoding', 'unclosed_quote', 'illegal_quote', 'too_many_errors'})


def configure_logger(name: str) -> logging.Logger:
    """
    Configure a logger with consistent formatting across all environments.

    Args:
        name (str): Name for the logger, typically __name__

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    if logging.getLogger().handlers:
        logger.propagate = True

        return logger

    if not logger.handlers:
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


class LoggerUtility:
    """Utility class for consistent logging across modules."""

    def __init__(self, name: str):
        """Initialize logger with module name."""
        self.logger = configure_logger(name)

    def log_validation_error(
        self,
        error_type: str,
        message: str,
        row: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        """
        Log a validation error in a consistent format.

        Terminal errors (the ones that end a validation run) are logged as
        warnings, field level errors only at debug level since a single run
        may produce thousands of them.

        Args:
            error_type: Machine readable error tag
            message: The human readable message
            row: Row number, if the error belongs to a row
            field: Field name, if the error belongs to a field
        """
        location = []

        if row is not None:
            location.append(f'row: {row}')

        if field is not None:
            location.append(f'field: {field}')

        location_str = ', '.join(location) if location else 'file'

        if error_type in TERMINAL_ERROR_TYPES:
            self.logger.warning(f'[{error_type}] {message} (at {location_str})')
        else:
            self.logger.debug(f'[{error_type}] {message} (at {location_str})')


default_logger = LoggerUtility('csvcraft-utils')
log_validation_error = default_logger.log_validation_error
