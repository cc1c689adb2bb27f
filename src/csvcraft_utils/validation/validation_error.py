"""
Validation error record and row context.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Any, Dict


@dataclass(frozen=True)
class ValidationError:
    """
    Represents a single problem found in a CSV file.

    Attributes:
        type: Machine readable tag, e.g. 'missing_field' or 'unclosed_quote'
        message: Human readable description of the problem
        row: 1-based row number, None for file level errors
        field: Name of the offending field, None when not attributable to one
    """
    type: str
    message: str
    row: Optional[int] = None
    field: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the error as a plain dictionary."""
        return asdict(self)

    def __str__(self) -> str:
        """String representation of the validation error."""
        location = {'row': self.row, 'field': self.field}
        location_str = ', '.join(f'{k}: {v}' for k, v in location.items() if v is not None)

        return f'[{self.type}] {self.message} (at {location_str or "file"})'


@dataclass(frozen=True)
class RowContext:
    """
    Where a field value comes from.

    Attributes:
        row: 1-based row number
        field: Name of the field being checked
        data: The whole row as produced by the row reader
    """
    row: int
    field: str
    data: Any = None
