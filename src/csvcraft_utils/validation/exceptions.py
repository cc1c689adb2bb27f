"""
Failures raised by the row reader for malformed CSV data.

The validation engine turns these into ValidationError records, they never
reach the caller of ValidationEngine.validate.
"""


class RowReaderError(Exception):
    """Base class for data problems detected while reading rows."""


class InvalidEncodingError(RowReaderError):
    """Raised when the file content does not decode under the configured encoding."""

    def __init__(self, encoding: str, reason: str = ''):
        self.encoding = encoding
        self.reason = reason
        super().__init__(f'invalid byte sequence in {encoding}')


class QuotingError(RowReaderError):
    """
    Raised when a record cannot be parsed because of its quotes.

    Attributes:
        line: 1-based line on which the offending record begins
        detail: The csv module's own diagnostic
        error_type: Tag used for the ValidationError reported in its place
    """

    error_type = 'quoting_error'

    def __init__(self, line: int, detail: str = ''):
        self.line = line
        self.detail = detail
        super().__init__(self.describe(line))

    def describe(self, line: int) -> str:
        return f'Quoting error on line {line}.'


class UnclosedQuoteError(QuotingError):
    """Raised when a quoted field is never closed."""

    error_type = 'unclosed_quote'

    def describe(self, line: int) -> str:
        return f'Unclosed quoted field on line {line}.'


class IllegalQuoteError(QuotingError):
    """Raised when text follows the closing quote of a field, e.g. '"x"y'."""

    error_type = 'illegal_quote'

    def describe(self, line: int) -> str:
        return f'Illegal quoting on line {line}.'
