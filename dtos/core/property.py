"""
DtoProperty - Validated name/value pair produced on every attribute write.
"""

import re
from typing import Any, Optional

from dtos.errors import InvalidKeyError

# Numeric strings: optional sign, digits with optional fraction (or a bare
# fraction), optional exponent, surrounding whitespace allowed. ASCII only.
_NUMERIC = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$', re.ASCII)


def is_numeric_key(key: Any) -> bool:
    """Return True for ints, floats and strings that read as a number."""
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    return isinstance(key, str) and _NUMERIC.match(key) is not None


class DtoProperty:
    """
    A single attribute assignment.

    Attributes:
        name: Attribute name (non-empty, non-numeric string)
        type: Optional type tag
        raw_value: Value as given by the caller
        value: Value to store (see coerce())
    """

    def __init__(self,
                 name: str,
                 value: Any,
                 type: Optional[str] = None) -> None:
        self.name = name
        self.type = type
        self.raw_value = value
        self.value = self.coerce(value)

    @classmethod
    def make(cls, name: Any, value: Any, type: Optional[str] = None) -> 'DtoProperty':
        """
        Validate the name and build a property.

        Args:
            name: Attribute name
            value: Any value, stored as is
            type: Optional type tag

        Returns:
            DtoProperty

        Raises:
            InvalidKeyError: If name is not a string, is blank, or is numeric
        """
        if not isinstance(name, str):
            raise InvalidKeyError(name, 'must be a string')
        if not name.strip():
            raise InvalidKeyError(name, 'must not be empty')
        if is_numeric_key(name):
            raise InvalidKeyError(name, 'must not be numeric')
        return cls(name, value, type)

    def coerce(self, value: Any) -> Any:
        return value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"DtoProperty({self.name}={self.value!r})"
