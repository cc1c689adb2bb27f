"""
Numeric field validators.
"""

import re
import math
import pandas as pd
from typing import List, Optional
from .base_validator import BaseFieldValidator
from ..validation_error import ValidationError, RowContext


INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')
FLOAT_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


def parse_number(value: str) -> Optional[float]:
    """Parse a plain decimal number, None if the value is not one."""
    value = value.strip()

    if not FLOAT_PATTERN.match(value):
        return None

    number = float(value)

    return number if math.isfinite(number) else None


class IntegerValidator(BaseFieldValidator):
    """Checks that a field holds an optionally signed whole number."""

    error_type = 'invalid_integer'
    error_message = 'Invalid integer field'

    def check_field(self, value: Optional[str], context: RowContext) -> List[ValidationError]:
        if pd.isna(value):
            return []

        if not INTEGER_PATTERN.match(value.strip()):
            return [self.error(context)]

        return []


class FloatValidator(BaseFieldValidator):
    """Checks that a field holds a finite decimal number, e.g. '12', '-0.5' or '1e3'."""

    error_type = 'invalid_float'
    error_message = 'Invalid float field'

    def check_field(self, value: Optional[str], context: RowContext) -> List[ValidationError]:
        if pd.isna(value):
            return []

        if parse_number(value) is None:
            return [self.error(context)]

        return []
