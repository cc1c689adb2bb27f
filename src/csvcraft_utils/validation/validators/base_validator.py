"""
Base validator class that all field validators must inherit from.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from ..validation_error import ValidationError, RowContext


class BaseFieldValidator(ABC):
    """
    Abstract base class for all field validators.

    A field validator checks a single value of a row and reports what is
    wrong with it. It keeps no state between calls, so one instance can be
    shared by several fields and reused for every row.

    Subclasses set ``error_type`` and ``error_message`` and implement
    check_field.
    """

    error_type: str = 'invalid_field'
    error_message: str = 'Invalid field'

    def __init__(self, message: Optional[str] = None):
        """
        Args:
            message: Optional message overriding the default error message
        """
        self.message = message or self.error_message

    @abstractmethod
    def check_field(self, value: Optional[str], context: RowContext) -> List[ValidationError]:
        """
        Validate a field value and return the problems found.

        Malformed data is reported, never raised.

        Args:
            value: The raw field value, None when the field is empty or missing
            context: Row number, field name and the whole row

        Returns:
            List of ValidationError objects, empty when the value is valid
        """
        pass

    def error(self, context: RowContext, message: Optional[str] = None) -> ValidationError:
        """Build an error of this validator's type for the given context."""
        return ValidationError(
            type=self.error_type,
            message=message or self.message,
            row=context.row,
            field=context.field,
        )

    def __repr__(self) -> str:
        return f'{type(self).__name__}()'
