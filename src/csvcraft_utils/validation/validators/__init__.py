"""
Field validator implementations.
"""

from .base_validator import BaseFieldValidator
from .mandatory_validator import MandatoryValidator
from .date_validator import DateValidator
from .number_validator import IntegerValidator, FloatValidator
from .range_validator import RangeValidator
from .regex_validator import RegexValidator

__all__ = [
    'BaseFieldValidator',
    'MandatoryValidator',
    'DateValidator',
    'IntegerValidator',
    'FloatValidator',
    'RangeValidator',
    'RegexValidator'
]
