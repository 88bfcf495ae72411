"""
Errors raised by DTO containers and the DTO factory.

Every error is a DtoError, and most also derive from the builtin that
matches their meaning, so callers may catch either.
"""

from typing import Any


class DtoError(Exception):
    """Base class for all DTOs errors."""


class InvalidKeyError(DtoError, ValueError):
    """Attribute name is not a string, is empty, or is numeric."""

    def __init__(self, name: Any, reason: str = 'must be a non-empty, non-numeric string') -> None:
        self.name = name
        super().__init__(f'Invalid attribute name {name!r}: {reason}')


class ReadOnlyError(DtoError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Dto object is read only. Unable to set property [{name}].')


class NotFillableError(DtoError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Property [{name}] is not fillable, thus unable to be set.')


class OverrideForbiddenError(DtoError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Property [{name}] is already set and overrides are forbidden.')


class UnknownAttributeError(DtoError, AttributeError):
    """
    Read of an attribute that was never set.

    Derives from AttributeError so that hasattr() and getattr() with a
    default keep working on containers.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f'Property [{name}] was not found in this object.')
        self.name = name


class InvalidArgumentError(DtoError, ValueError):
    """The factory was given an unusable target class or source."""


class DtoNotFoundError(InvalidArgumentError):
    def __init__(self, dto_class: str) -> None:
        self.dto_class = dto_class
        super().__init__(f'Dto object for class [{dto_class}] not found.')
