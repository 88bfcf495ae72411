"""
Dto - Attribute container with change tracking and write policies.
"""

import json
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Optional, Sequence, Union

from dtos.core.options import DtoOptions, resolve_options
from dtos.core.property import DtoProperty
from dtos.core.result import AttributeResult
from dtos.errors import (
    DtoError,
    NotFillableError,
    OverrideForbiddenError,
    ReadOnlyError,
    UnknownAttributeError,
)

_MISSING = object()

# Default silent flag for containers constructed in the current context
_quiet_construction: ContextVar[bool] = ContextVar('dtos_quiet_construction', default=False)


@contextmanager
def quiet_construction() -> Iterator[None]:
    """
    Construct containers in silent mode, whatever their __init__ signature.

    Example:
        with quiet_construction():
            dto = UserDto(data)
        dto.should_be_silent(False)
    """
    token = _quiet_construction.set(True)
    try:
        yield
    finally:
        _quiet_construction.reset(token)


class Dto:
    """
    A bag of named attributes.

    Subclasses restrict which names may be set with `fillable` and opt into
    policies by inheriting the markers from dtos.core.options. Attributes
    are reachable as dto.name, dto['name'] or dto.get('name').

    A container starts uninitialized. The first fill() (the constructor
    always makes one) snapshots the attributes as the original values and
    marks it initialized. Later writes of a different value are tracked as
    dirty.

    Attributes:
        fillable: Names that may be set (empty means any name)
        property_class: DtoProperty subclass built on every write
    """

    fillable: Sequence[str] = ()
    property_class: type[DtoProperty] = DtoProperty

    def __init__(self,
                 attributes: Union[Mapping[str, Any], Iterable, None] = None,
                 *,
                 silent: Optional[bool] = None) -> None:
        """
        Create a container and fill it.

        Args:
            attributes: Initial attributes (mapping or iterable of pairs)
            silent: Absorb policy errors instead of raising them (defaults
                    to True inside quiet_construction())
        """
        self._attributes: dict[str, Any] = {}
        self._original: dict[str, Any] = {}
        self._dirty: dict[str, Any] = {}
        self._initialized = False
        self._silent = _quiet_construction.get() if silent is None else bool(silent)
        self._options: DtoOptions = resolve_options(type(self))

        self.fill(attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dto):
            return NotImplemented
        return type(self) is type(other) and self._attributes == other._attributes

    __hash__ = None

    # Attribute and item syntax

    def __getattr__(self, name: str) -> Any:
        """Called only when normal lookup fails, i.e. for container attributes."""
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
        return self.get_attribute(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith('_'):
            object.__setattr__(self, name, value)
        else:
            self.set_attribute(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith('_'):
            object.__delattr__(self, name)
        else:
            self.unset(name)

    def __getitem__(self, name: str) -> Any:
        return self.get_attribute(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_attribute(name, value)

    def __delitem__(self, name: str) -> None:
        self.unset(name)

    def __contains__(self, name: object) -> bool:
        return self.has_attribute(name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._attributes))

    def __len__(self) -> int:
        return len(self._attributes)

    # Writing

    def fill(self, attributes: Union[Mapping[str, Any], Iterable, None] = None) -> 'Dto':
        """
        Set every attribute in attributes, then initialize the container.

        Entries are applied in iteration order, so later duplicates win.
        Initialization happens once; filling an initialized container only
        sets attributes.

        Args:
            attributes: Mapping, Dto or iterable of (name, value) pairs

        Returns:
            self
        """
        if attributes is not None:
            if isinstance(attributes, (Mapping, Dto)):
                attributes = attributes.items()
            for name, value in attributes:
                self.set_attribute(name, value)

        self._initialize()
        return self

    def set_attribute(self, name: str, value: Any) -> 'Dto':
        """
        Set one attribute after running the policy checks.

        Checks run in this order and the first failure wins:
        read only (once initialized), fillable whitelist, forbidden overrides.
        In silent mode failures are dropped and the attribute stays unset.

        Raises:
            InvalidKeyError: name is not a non-empty, non-numeric string
            ReadOnlyError: container is initialized and read only
            NotFillableError: name is not in a non-empty fillable
            OverrideForbiddenError: name is already set and overrides are forbidden
        """
        if self._silent:
            self.try_set(name, value)
        else:
            self._store(name, value)
        return self

    set = set_attribute

    def try_set(self, name: str, value: Any) -> AttributeResult:
        """Set an attribute and report the outcome instead of raising."""
        try:
            prop = self._store(name, value)
        except DtoError as error:
            return AttributeResult(name, error=error)
        return AttributeResult(prop.name, prop.value)

    def _store(self, name: str, value: Any) -> DtoProperty:
        prop = self.property_class.make(name, value)
        self.validate_set_attribute(prop)

        if prop.name in self._attributes:
            if self._differs_from_original(prop):
                self._dirty[prop.name] = prop.value
            else:
                self._dirty.pop(prop.name, None)
        else:
            self._original[prop.name] = prop.value
        self._attributes[prop.name] = prop.value
        return prop

    def unset(self, name: str) -> 'Dto':
        """
        Remove an attribute. Missing names are ignored.

        Raises:
            ReadOnlyError: container is initialized and read only
        """
        if self._initialized and self._options.read_only:
            if self._silent:
                return self
            raise ReadOnlyError(name)
        if self.has_attribute(name):
            del self._attributes[name]
            self._dirty.pop(name, None)
        return self

    # Reading

    def get_attribute(self, name: str) -> Any:
        """
        Get one attribute.

        Returns None for missing names when unknown attributes are ignored
        or the container is silent.

        Raises:
            UnknownAttributeError: name was never set
        """
        if self._silent:
            return self.try_get(name).value
        return self._load(name)

    get = get_attribute

    def try_get(self, name: str) -> AttributeResult:
        """Get an attribute and report the outcome instead of raising."""
        try:
            value = self._load(name)
        except DtoError as error:
            return AttributeResult(name, error=error)
        return AttributeResult(name, value)

    def _load(self, name: str) -> Any:
        self.validate_get_attribute(name)
        if self.has_attribute(name):
            return self._attributes[name]
        return None

    def has_attribute(self, name: object) -> bool:
        try:
            return name in self._attributes
        except TypeError:
            return False

    has = has_attribute

    def all(self) -> dict[str, Any]:
        """Return a copy of all attributes."""
        return dict(self._attributes)

    to_array = all
    to_dict = all

    def keys(self) -> list[str]:
        return list(self._attributes.keys())

    def values(self) -> list[Any]:
        return list(self._attributes.values())

    def items(self) -> list[tuple[str, Any]]:
        return list(self._attributes.items())

    def to_json(self, **kwargs: Any) -> str:
        """
        Encode the attributes as a JSON object.

        Args:
            **kwargs: Passed on to json.dumps (indent, sort_keys, ...)

        Raises:
            TypeError: An attribute value is not JSON serializable
        """
        return json.dumps(self._attributes, **kwargs)

    # Change tracking

    def get_original(self, name: Optional[str] = None) -> Any:
        if name is not None:
            return self._original.get(name)
        return dict(self._original)

    def get_dirty(self, name: Optional[str] = None) -> Any:
        if name is not None:
            return self._dirty.get(name)
        return dict(self._dirty)

    def is_dirty(self, name: Optional[str] = None) -> bool:
        if name is not None:
            return name in self._dirty
        return bool(self._dirty)

    def sync_original(self) -> 'Dto':
        """Take the current attributes as the new original values."""
        self._original = dict(self._attributes)
        return self

    def _differs_from_original(self, prop: DtoProperty) -> bool:
        return self._original.get(prop.name, _MISSING) != prop.value

    # State

    def is_empty(self) -> bool:
        """True if no attribute holds a value other than None."""
        return all(value is None for value in self._attributes.values())

    def is_filled(self) -> bool:
        return not self.is_empty()

    def is_initialized(self) -> bool:
        return self._initialized

    def _initialize(self) -> None:
        if not self._initialized:
            self.sync_original()
            self._initialized = True

    def get_fillable(self) -> tuple[str, ...]:
        return tuple(self.fillable)

    # Policies

    def get_options(self) -> DtoOptions:
        return self._options

    def set_options(self, partial: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> 'Dto':
        """
        Override options for this instance only.

        Example:
            dto.set_options({'read_only': True})
            dto.set_options(ignore_unknown=True)
        """
        self._options = self._options.merge({**(partial or {}), **kwargs})
        return self

    def option(self, name: str) -> bool:
        if name not in DtoOptions.names():
            return False
        return getattr(self._options, name)

    def should_be_silent(self, silent: bool = True) -> 'Dto':
        self._silent = bool(silent)
        return self

    def is_silent(self) -> bool:
        return self._silent

    def validate_set_attribute(self, prop: DtoProperty) -> None:
        if self._initialized and self._options.read_only:
            raise ReadOnlyError(prop.name)
        if self.fillable and prop.name not in self.fillable:
            raise NotFillableError(prop.name)
        if self._options.forbid_overrides and self.has_attribute(prop.name):
            raise OverrideForbiddenError(prop.name)

    def validate_get_attribute(self, name: str) -> None:
        if not self._options.ignore_unknown and not self.has_attribute(name):
            raise UnknownAttributeError(name)
