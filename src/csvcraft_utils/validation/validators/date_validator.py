"""
Date format validator.
"""

import pandas as pd
from datetime import datetime
from typing import List, Optional
from .base_validator import BaseFieldValidator
from ..validation_error import ValidationError, RowContext


class DateValidator(BaseFieldValidator):
    """
    Checks that a field holds a date in the given strptime format.

    Empty values are not reported, use MandatoryValidator for that.
    """

    error_type = 'invalid_date'
    error_message = 'Invalid date field'

    def __init__(self, format: str, message: Optional[str] = None):
        """
        Initialize the validator.

        Args:
            format: strptime format, e.g. '%Y%m%d'
            message: Optional message overriding the default error message

        Raises:
            TypeError: If format is not a string
            ValueError: If format is empty or contains an invalid directive
        """
        super().__init__(message)

        if not isinstance(format, str):
            raise TypeError(f'Date format must be a string, got {type(format).__name__}')

        if not format:
            raise ValueError('Date format must not be empty')

        self.__check_format(format)
        self.format = format

    @staticmethod
    def __check_format(format: str) -> None:
        """Parse an empty string to surface bad directives at construction time."""
        try:
            datetime.strptime('', format)
        except ValueError as e:
            if 'directive' in str(e) or 'stray %' in str(e):
                raise ValueError(f'Invalid date format {format!r}: {e}') from e

    def check_field(self, value: Optional[str], context: RowContext) -> List[ValidationError]:
        if pd.isna(value):
            return []

        try:
            datetime.strptime(value, self.format)
        except ValueError:
            return [self.error(context)]

        return []

    def __repr__(self) -> str:
        return f'DateValidator(format={self.format!r})'
