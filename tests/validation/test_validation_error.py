"""Tests for the ValidationError record."""

import dataclasses

import pytest

from csvcraft_utils.validation import ValidationError


class TestValidationError:

    def test_equality_uses_all_attributes(self):
        error = ValidationError(type='missing_field', message='Missing mandatory field', row=4, field='id')

        assert error == ValidationError(type='missing_field', message='Missing mandatory field', row=4, field='id')
        assert error != ValidationError(type='missing_field', message='Missing mandatory field', row=5, field='id')
        assert error != ValidationError(type='missing_field', message='Missing mandatory field', row=4)

    def test_row_and_field_default_to_none(self):
        error = ValidationError(type='too_many_errors', message='Too many errors were found')

        assert error.row is None
        assert error.field is None

    def test_is_immutable(self):
        error = ValidationError(type='invalid_date', message='Invalid date field', row=1, field='date')

        with pytest.raises(dataclasses.FrozenInstanceError):
            error.row = 2

    def test_is_hashable(self):
        error = ValidationError(type='invalid_date', message='Invalid date field', row=1, field='date')

        assert len({error, dataclasses.replace(error)}) == 1

    def test_to_dict(self):
        error = ValidationError(type='unclosed_quote', message='Unclosed quoted field on line 4.', row=4)

        assert error.to_dict() == {
            'type': 'unclosed_quote',
            'message': 'Unclosed quoted field on line 4.',
            'row': 4,
            'field': None,
        }

    def test_str(self):
        assert str(ValidationError(type='missing_field', message='Missing', row=4, field='id')) == \
            '[missing_field] Missing (at row: 4, field: id)'
        assert str(ValidationError(type='invalid_encoding', message='invalid byte sequence in UTF-8')) == \
            '[invalid_encoding] invalid byte sequence in UTF-8 (at file)'
