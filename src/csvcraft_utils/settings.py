"""Default dialect, encoding and limit settings."""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv


DEFAULT_ERRORS_LIMIT = 1000


def parse_errors_limit(value: Optional[str]) -> Optional[int]:
    """
    Parse an errors limit given as text.

    Args:
        value: Positive integer as a string, or 'none' to disable the limit

    Returns:
        The limit, or None for no limit

    Raises:
        ValueError: If the value is neither 'none' nor a positive integer
    """
    if value is None or value.strip().lower() in ('none', 'null', ''):
        return None

    limit = int(value)

    if limit < 1:
        raise ValueError(f'Errors limit must be a positive integer, got {limit}')

    return limit


@dataclass
class ValidationSettings:
    """
    Defaults used by the validation engine when an option is not passed to validate.

    Attributes:
        delimiter: Field separator
        quotechar: Quote character
        encoding: Text encoding of the files
        errors_limit: Number of errors after which validation stops, None for no limit
    """
    delimiter: str = ','
    quotechar: str = '"'
    encoding: str = 'UTF-8'
    errors_limit: Optional[int] = DEFAULT_ERRORS_LIMIT

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'ValidationSettings':
        """
        Build settings from environment variables, after loading a .env file.

        Recognized variables: CSVCRAFT_DELIMITER, CSVCRAFT_QUOTECHAR,
        CSVCRAFT_ENCODING and CSVCRAFT_ERRORS_LIMIT ('none' disables the limit).
        Variables already set in the environment take precedence over the file.

        Args:
            dotenv_path (str, optional): Path to the .env file. When omitted a
                .env file in the working directory is used if there is one.

        Raises:
            ValueError: If dotenv_path is given but cannot be loaded, or a variable is malformed
        """
        if dotenv_path is not None:
            if not load_dotenv(dotenv_path=dotenv_path):
                raise ValueError(f'No settings could be loaded from {dotenv_path}')
        else:
            load_dotenv(dotenv_path='.env')

        defaults = cls()

        if (errors_limit := os.getenv('CSVCRAFT_ERRORS_LIMIT')) is not None:
            errors_limit = parse_errors_limit(errors_limit)
        else:
            errors_limit = defaults.errors_limit

        return cls(
            delimiter=os.getenv('CSVCRAFT_DELIMITER', defaults.delimiter),
            quotechar=os.getenv('CSVCRAFT_QUOTECHAR', defaults.quotechar),
            encoding=os.getenv('CSVCRAFT_ENCODING', defaults.encoding),
            errors_limit=errors_limit,
        )
