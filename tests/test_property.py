"""
Unit tests for DtoProperty.
"""

import pytest

from dtos import DtoProperty, InvalidKeyError
from dtos.core.property import is_numeric_key


class TestDtoPropertyMake:
    """Name validation and value storage."""

    def test_stores_name_value_and_type(self):
        prop = DtoProperty.make('name', 'Alex', type='str')
        assert prop.name == 'name'
        assert prop.value == 'Alex'
        assert prop.raw_value == 'Alex'
        assert prop.type == 'str'

    def test_accepts_any_value(self):
        value = object()
        assert DtoProperty.make('thing', value).value is value
        assert DtoProperty.make('nothing', None).value is None
        # Numeric values are fine, only numeric names are rejected
        assert DtoProperty.make('age', 30).value == 30

    @pytest.mark.parametrize('name', ['123', '0', '1.5', ' 42 ', '-7', '+3', '1e3', '.5'])
    def test_rejects_numeric_names(self, name):
        with pytest.raises(InvalidKeyError, match='numeric'):
            DtoProperty.make(name, 'x')

    @pytest.mark.parametrize('name', ['', '   '])
    def test_rejects_empty_names(self, name):
        with pytest.raises(InvalidKeyError, match='empty'):
            DtoProperty.make(name, 'x')

    @pytest.mark.parametrize('name', [1, 2.5, None, ('a',), b'name'])
    def test_rejects_non_string_names(self, name):
        with pytest.raises(InvalidKeyError, match='string'):
            DtoProperty.make(name, 'x')

    def test_invalid_key_is_a_value_error(self):
        with pytest.raises(ValueError):
            DtoProperty.make('123', 'x')

    def test_error_keeps_the_name(self):
        with pytest.raises(InvalidKeyError) as ctx:
            DtoProperty.make('42', 'x')
        assert ctx.value.name == '42'

    def test_str_and_repr(self):
        prop = DtoProperty.make('age', 30)
        assert str(prop) == '30'
        assert repr(prop) == 'DtoProperty(age=30)'


class TestIsNumericKey:

    @pytest.mark.parametrize('key', ['1a', 'nan', 'inf', '0x1A', 'a1', '1.2.3', 'e5', 'name', '\u0663', '\uff11\uff12', '\u00a012'])
    def test_non_numeric_strings(self, key):
        assert not is_numeric_key(key)

    def test_numbers_are_numeric(self):
        assert is_numeric_key(3)
        assert is_numeric_key(3.5)
        assert not is_numeric_key(True)


class TestCoerceHook:

    def test_subclass_can_coerce(self):
        class UpperProperty(DtoProperty):
            def coerce(self, value):
                return value.upper()

        prop = UpperProperty.make('name', 'alex')
        assert prop.raw_value == 'alex'
        assert prop.value == 'ALEX'


class TestNonAsciiNames:

    @pytest.mark.parametrize('name', ['٣', '١٢', '１２'])
    def test_non_ascii_digits_are_valid_names(self, name):
        assert DtoProperty.make(name, 'x').name == name
