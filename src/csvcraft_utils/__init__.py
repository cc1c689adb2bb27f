"""
CSVCraft Utils - A pre-flight validation utility for CSV files.

This package provides:
- A validation engine that reports every problem of a CSV file, up to a limit
- Field validators for mandatory, date, numeric and pattern checks
"""

from ._version import __version__
from .settings import ValidationSettings
from .validation import (
    ValidationEngine,
    ValidationError,
    RowContext,
    RowReader,
    BaseFieldValidator,
    MandatoryValidator,
    DateValidator,
    IntegerValidator,
    FloatValidator,
    RangeValidator,
    RegexValidator,
)


__all__ = [
    # Configuration
    'ValidationSettings',

    # Validation components
    'ValidationEngine',
    'ValidationError',
    'RowContext',
    'RowReader',

    # Field validators
    'BaseFieldValidator',
    'MandatoryValidator',
    'DateValidator',
    'IntegerValidator',
    'FloatValidator',
    'RangeValidator',
    'RegexValidator',

    # Version
    '__version__',
]
