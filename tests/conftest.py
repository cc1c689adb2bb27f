"""Shared fixtures: CSV files written into a temporary directory."""

from pathlib import Path
from typing import Callable

import pytest


TOO_MANY_ERRORS_HEADER = 'order,date,customer,item,c_sales_amount,quantity,unit_price'
TOO_MANY_ERRORS_ROWS = 300


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str | bytes], Path]:
    """Return a helper that writes text or raw bytes to a file in tmp_path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name

        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding='utf-8', newline='')

        return path

    return _write


@pytest.fixture
def valid_csv(write_csv) -> Path:
    return write_csv('valid.csv', 'id,name\n1,Alice\n2,Bob\n3,Carol\n')


@pytest.fixture
def valid_custom_csv(write_csv) -> Path:
    """Semicolon separated, single quoted values containing the default delimiter."""
    return write_csv('valid_custom.csv', "id;name\n1;'Smith, John'\n2;'Doe; Jane'\n")


@pytest.fixture
def invalid_encoding_csv(write_csv) -> Path:
    """ISO-8859-9 encoded content, not valid UTF-8."""
    return write_csv('invalid_encoding.csv', 'id,name\n1,Jürgen\n2,Şule\n'.encode('iso-8859-9'))


@pytest.fixture
def unclosed_quote_csv(write_csv) -> Path:
    """The quote opened on line 4 is never closed."""
    return write_csv('unclosed_quote.csv', 'id,name\n1,Alice\n2,Bob\n3,"Carol\n4,Dave\n')


@pytest.fixture
def missing_mandatory_field_csv(write_csv) -> Path:
    """Row 4 has no id (the header line counts as row 1)."""
    return write_csv('missing_mandatory_field.csv', 'id,name\n1,Alice\n2,Bob\n,Carol\n5,Eve\n')


@pytest.fixture
def too_many_errors_csv(write_csv) -> Path:
    """Every row has five fields that are not '%Y%m%d' dates."""
    rows = [TOO_MANY_ERRORS_HEADER]

    for i in range(TOO_MANY_ERRORS_ROWS):
        rows.append(f'{1000 + i},20240115,ACME,widget,10.5,{i % 9 + 1},5.25')

    return write_csv('too_many_errors.csv', '\n'.join(rows) + '\n')
