"""Utility modules for csvcraft-utils."""

from .logger import configure_logger, log_validation_error

__all__ = [
    'configure_logger',
    'log_validation_error'
]
