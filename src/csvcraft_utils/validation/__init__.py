"""
Validation module for CSV files and their content.
"""

from .validation_engine import ValidationEngine
from .validation_error import ValidationError, RowContext
from .row_reader import RowReader
from .exceptions import (
    RowReaderError,
    InvalidEncodingError,
    QuotingError,
    UnclosedQuoteError,
    IllegalQuoteError,
)
from .validators import (
    BaseFieldValidator,
    MandatoryValidator,
    DateValidator,
    IntegerValidator,
    FloatValidator,
    RangeValidator,
    RegexValidator,
)

__all__ = [
    'ValidationEngine',
    'ValidationError',
    'RowContext',
    'RowReader',
    'RowReaderError',
    'InvalidEncodingError',
    'QuotingError',
    'UnclosedQuoteError',
    'IllegalQuoteError',
    'BaseFieldValidator',
    'MandatoryValidator',
    'DateValidator',
    'IntegerValidator',
    'FloatValidator',
    'RangeValidator',
    'RegexValidator'
]
