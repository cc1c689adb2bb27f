"""
Mandatory field validator.
"""

import pandas as pd
from typing import List, Optional
from .base_validator import BaseFieldValidator
from ..validation_error import ValidationError, RowContext


class MandatoryValidator(BaseFieldValidator):
    """Reports fields that are empty or missing from the row."""

    error_type = 'missing_field'
    error_message = 'Missing mandatory field'

    def check_field(self, value: Optional[str], context: RowContext) -> List[ValidationError]:
        if pd.isna(value):
            return [self.error(context)]

        return []
