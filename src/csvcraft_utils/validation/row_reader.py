"""
Dialect aware CSV row reader.
"""

import csv
import codecs
import chardet
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union
from .exceptions import InvalidEncodingError, UnclosedQuoteError, IllegalQuoteError


Row = Union[List[Optional[str]], Dict[str, Optional[str]]]

UNCLOSED_QUOTE_MARKER = 'unexpected end of data'
ILLEGAL_QUOTE_MARKER = 'expected after'

# An unclosed quote swallows the rest of the file into one field
RUN_FIELD_SIZE_LIMIT = 2 ** 31 - 1


def detect_encoding(file_path: str | Path, sample_size: int = 64 * 1024) -> Dict[str, Any]:
    """
    Guess the encoding of a file from its first bytes.

    Args:
        file_path: Path to the file
        sample_size: Number of bytes to inspect

    Returns:
        chardet result, e.g. {'encoding': 'ISO-8859-9', 'confidence': 0.73, 'language': 'Turkish'}
    """
    with open(file_path, 'rb') as f:
        raw_data = f.read(sample_size)

    return chardet.detect(raw_data)


class RowReader:
    """
    Reads a CSV file row by row.

    Must be used as a context manager, the file handle is released on exit.
    Rows are lists of values, or dictionaries keyed by the header row when
    ``headers`` is set. Empty unquoted values are read as None, quoted empty
    values as ''.

    Raises:
        InvalidEncodingError: On enter, if the file does not decode with ``encoding``
        UnclosedQuoteError: While iterating, if a quoted field is never closed
        IllegalQuoteError: While iterating, if text follows a closing quote
    """

    CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        file_path: str | Path,
        delimiter: str = ',',
        quotechar: str = '"',
        encoding: str = 'UTF-8',
        headers: bool = False,
        return_headers: bool = False,
        **reader_options
    ):
        """
        Initialize the reader and check the dialect options.

        Args:
            file_path: Path to the CSV file
            delimiter: Field separator
            quotechar: Quote character
            encoding: Text encoding of the file
            headers: Treat the first row as header and yield dictionaries
            return_headers: Also yield the header row itself
            **reader_options: Additional arguments passed to csv.reader

        Raises:
            TypeError: If the dialect options are malformed
            LookupError: If the encoding is unknown
        """
        self.__file_path = Path(file_path)
        self.__encoding = encoding
        self.__headers = headers
        self.__return_headers = return_headers
        self.__reader_options = {
            'strict': True,
            'quoting': csv.QUOTE_NOTNULL,
            **reader_options,
            'delimiter': delimiter,
            'quotechar': quotechar,
        }
        self.__handle = None
        self.__reader = None
        self.__saved_field_size_limit = None

        # Fail before touching the file when the dialect or encoding is wrong
        csv.reader([], **self.__reader_options)
        codecs.lookup(encoding)

    def __check_encoding(self) -> None:
        """Decode the whole file incrementally so no row is read from an undecodable file."""
        decoder = codecs.getincrementaldecoder(self.__encoding)()

        with open(self.__file_path, 'rb') as f:
            try:
                while chunk := f.read(self.CHUNK_SIZE):
                    decoder.decode(chunk)

                decoder.decode(b'', final=True)

            except UnicodeDecodeError as e:
                raise InvalidEncodingError(self.__encoding, e.reason) from e

    def __enter__(self) -> 'RowReader':
        self.__check_encoding()
        self.__handle = open(self.__file_path, encoding=self.__encoding, newline='')
        self.__saved_field_size_limit = csv.field_size_limit(RUN_FIELD_SIZE_LIMIT)
        self.__reader = csv.reader(self.__handle, **self.__reader_options)

        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.close()

        return False

    def close(self) -> None:
        """Release the file handle and restore the csv field size limit."""
        if self.__handle is not None and not self.__handle.closed:
            self.__handle.close()

        if self.__saved_field_size_limit is not None:
            csv.field_size_limit(self.__saved_field_size_limit)
            self.__saved_field_size_limit = None

    @property
    def closed(self) -> bool:
        """Whether the file handle has been released (or never opened)."""
        return self.__handle is None or self.__handle.closed

    @property
    def line_num(self) -> int:
        """Number of physical lines read so far."""
        return self.__reader.line_num if self.__reader is not None else 0

    def __next_record(self) -> List[Optional[str]]:
        """Read one record, translating quoting failures."""
        line = self.__reader.line_num + 1

        try:
            return next(self.__reader)

        except csv.Error as e:
            if UNCLOSED_QUOTE_MARKER in str(e):
                raise UnclosedQuoteError(line, str(e)) from e

            if ILLEGAL_QUOTE_MARKER in str(e):
                raise IllegalQuoteError(line, str(e)) from e

            raise

    def __iter__(self) -> Iterator[Row]:
        if self.__reader is None:
            raise RuntimeError('RowReader must be entered before iterating')

        header = None

        while True:
            try:
                record = self.__next_record()
            except StopIteration:
                return

            if not self.__headers:
                yield record
                continue

            if header is None:
                header = record

                if self.__return_headers:
                    yield dict(zip(header, header))

                continue

            yield {
                name: record[i] if i < len(record) else None
                for i, name in enumerate(header)
            }
