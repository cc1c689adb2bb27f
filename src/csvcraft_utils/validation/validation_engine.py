"""
Main validation engine that drives the row reader and the field validators.
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence
from .row_reader import Row, RowReader, detect_encoding
from .exceptions import InvalidEncodingError, QuotingError
from .validation_error import ValidationError, RowContext
from .validators import BaseFieldValidator
from ..settings import ValidationSettings
from ..utils import configure_logger, log_validation_error


TOO_MANY_ERRORS_MESSAGE = 'Too many errors were found'


class ValidationEngine:
    """
    Validates a CSV file and collects every problem found in it.

    Problems in the data (undecodable bytes, unclosed quotes, fields rejected
    by a field validator) never raise: they are collected in ``errors``.
    Collection stops once the errors limit is reached. Mistakes in the
    configuration itself (e.g. a multi-character quote char) are raised.

    Example:
        >>> engine = ValidationEngine('orders.csv')
        >>> engine.validate(
        ...     headers=True,
        ...     fields=['id', 'date'],
        ...     field_validators={'id': MandatoryValidator(), 'date': DateValidator(format='%Y%m%d')},
        ... )
        >>> engine.errors
        [ValidationError(type='missing_field', message='Missing mandatory field', row=4, field='id')]
    """

    def __init__(self, file_path: str | Path, settings: Optional[ValidationSettings] = None):
        """
        Initialize the validation engine.

        Args:
            file_path: Path to the CSV file
            settings: Defaults for the dialect, encoding and errors limit
        """
        self.__logger = configure_logger(__name__)
        self.file_path = file_path
        self.settings = settings or ValidationSettings()
        self._errors: List[ValidationError] = []
        self.__errors_limit: Optional[int] = self.settings.errors_limit

    def validate(self, options: Optional[Mapping[str, Any]] = None, **kwargs) -> None:
        """
        Validate the file. Every call starts with an empty error list.

        Options can be given as a mapping, as keyword arguments, or both
        (keyword arguments win).

        Args:
            options: Validation options, see below
            **kwargs: Validation options:
                fields: Ordered field names of a row
                field_validators: Mapping of field name to field validator
                errors_limit: Stop after this many errors, None for no limit
                delimiter, quotechar, encoding, headers, return_headers and
                any other option are passed to the RowReader

        Raises:
            TypeError, ValueError, LookupError, OSError: On invalid configuration
        """
        self._errors = []

        options = {**(options or {}), **kwargs}
        fields: Optional[Sequence[str]] = options.pop('fields', None)
        field_validators: Optional[Mapping[str, BaseFieldValidator]] = options.pop('field_validators', None)
        errors_limit = options.pop('errors_limit', self.settings.errors_limit)
        self.__check_errors_limit(errors_limit)

        reader_options = self.__reader_options(options)

        self.__errors_limit = errors_limit
        self.__logger.info(f'Validating {self.file_path}')

        try:
            with RowReader(self.file_path, **reader_options) as rows:
                for row_number, row in enumerate(rows, 1):
                    if not (fields and field_validators):
                        continue

                    if not self.__validate_row(row, row_number, fields, field_validators):
                        self.__add_error(ValidationError(type='too_many_errors', message=TOO_MANY_ERRORS_MESSAGE))
                        break

        except InvalidEncodingError as e:
            self.__log_encoding_hint(e)
            self.__add_error(ValidationError(type='invalid_encoding', message=str(e)))

        except QuotingError as e:
            self.__add_error(ValidationError(type=e.error_type, message=str(e), row=e.line))

        self.__logger.info(f'Validation of {self.file_path} finished with {len(self._errors)} error(s)')

    def __reader_options(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """Fill in the dialect defaults, everything left over is passed through."""
        return {
            'delimiter': options.pop('delimiter', self.settings.delimiter),
            'quotechar': options.pop('quotechar', self.settings.quotechar),
            'encoding': options.pop('encoding', self.settings.encoding),
            'headers': options.pop('headers', False),
            'return_headers': options.pop('return_headers', False),
            **options,
        }

    @staticmethod
    def __check_errors_limit(errors_limit: Any) -> None:
        if errors_limit is None:
            return

        if isinstance(errors_limit, bool) or not isinstance(errors_limit, int):
            raise TypeError(f'errors_limit must be an integer or None, got {errors_limit!r}')

        if errors_limit < 1:
            raise ValueError(f'errors_limit must be a positive integer, got {errors_limit}')

    @staticmethod
    def __field_value(row: Row, position: int, name: str) -> Optional[str]:
        """Look up a field by header name, or by position for rows without headers."""
        if isinstance(row, Mapping):
            return row.get(name)

        return row[position] if position < len(row) else None

    def __validate_row(
        self,
        row: Row,
        row_number: int,
        fields: Sequence[str],
        field_validators: Mapping[str, BaseFieldValidator]
    ) -> bool:
        """
        Run the field validators on one row.

        Returns:
            False as soon as the errors limit is reached, True otherwise
        """
        for position, name in enumerate(fields):
            validator = field_validators.get(name)

            if validator is None:
                continue

            value = self.__field_value(row, position, name)
            context = RowContext(row=row_number, field=name, data=row)

            for error in validator.check_field(value, context):
                if error.field is None:
                    error = replace(error, field=name)

                self.__add_error(error)

                if self.__limit_reached():
                    return False

        return True

    def __limit_reached(self) -> bool:
        return self.__errors_limit is not None and len(self._errors) >= self.__errors_limit

    def __add_error(self, error: ValidationError) -> None:
        self._errors.append(error)
        log_validation_error(error.type, error.message, row=error.row, field=error.field)

    def __log_encoding_hint(self, error: InvalidEncodingError) -> None:
        detected = detect_encoding(self.file_path)

        self.__logger.warning(
            f'{self.file_path} is not valid {error.encoding} ({error.reason}), '
            f'detected {detected["encoding"]} with confidence {detected["confidence"]}'
        )

    @property
    def errors(self) -> List[ValidationError]:
        """Errors found by the last validate call, in the order they were found."""
        return list(self._errors)

    def has_errors(self) -> bool:
        """Check if the last validate call found any error."""
        return bool(self._errors)

    def errors_of_type(self, error_type: str) -> List[ValidationError]:
        """Get the errors with the given type."""
        return [e for e in self._errors if e.type == error_type]
