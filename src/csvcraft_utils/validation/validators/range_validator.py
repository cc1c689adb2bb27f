"""
Numeric range validator.
"""

import pandas as pd
from typing import Any, List, Optional
from .base_validator import BaseFieldValidator
from .number_validator import parse_number
from ..validation_error import ValidationError, RowContext


class RangeValidator(BaseFieldValidator):
    """
    Checks that a numeric field lies within inclusive bounds.

    Values that are not numbers at all are reported as out of range too.
    """

    error_type = 'out_of_range'

    def __init__(
        self,
        min_value: Optional[Any] = None,
        max_value: Optional[Any] = None,
        message: Optional[str] = None
    ):
        """
        Initialize the validator.

        Args:
            min_value: Minimum allowed value (inclusive)
            max_value: Maximum allowed value (inclusive)
            message: Optional message overriding the generated one

        Raises:
            ValueError: If no bound is given or min_value is greater than max_value
        """
        if min_value is None and max_value is None:
            raise ValueError('RangeValidator needs min_value, max_value or both')

        if min_value is not None and max_value is not None and min_value > max_value:
            raise ValueError(f'min_value {min_value} is greater than max_value {max_value}')

        self.min_value = min_value
        self.max_value = max_value

        range_str = []

        if min_value is not None:
            range_str.append(f'>= {min_value}')

        if max_value is not None:
            range_str.append(f'<= {max_value}')

        super().__init__(message or f'Value must be {" and ".join(range_str)}')

    def check_field(self, value: Optional[str], context: RowContext) -> List[ValidationError]:
        if pd.isna(value):
            return []

        number = parse_number(value)

        if number is None:
            return [self.error(context)]

        if self.min_value is not None and number < self.min_value:
            return [self.error(context)]

        if self.max_value is not None and number > self.max_value:
            return [self.error(context)]

        return []

    def __repr__(self) -> str:
        return f'RangeValidator(min_value={self.min_value!r}, max_value={self.max_value!r})'
