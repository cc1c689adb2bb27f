"""
Regular expression validator.
"""

import re
import pandas as pd
from typing import List, Optional
from .base_validator import BaseFieldValidator
from ..validation_error import ValidationError, RowContext


class RegexValidator(BaseFieldValidator):
    """Checks that a field matches a regular expression from its first character."""

    error_type = 'invalid_format'

    def __init__(
        self,
        pattern: str,
        flags: re.RegexFlag = re.UNICODE,
        message: Optional[str] = None
    ):
        """
        Initialize the validator.

        Args:
            pattern: Regular expression pattern
            flags: Regular expression flags
            message: Optional message overriding the default error message

        Raises:
            re.error: If the pattern does not compile
        """
        self.regex = re.compile(pattern, flags)
        super().__init__(message or f'Value does not match pattern: {pattern}')

    def check_field(self, value: Optional[str], context: RowContext) -> List[ValidationError]:
        if pd.isna(value):
            return []

        if not self.regex.match(value):
            return [self.error(context)]

        return []

    def __repr__(self) -> str:
        return f'RegexValidator(pattern={self.regex.pattern!r})'
