"""
DtoOptions - Write/read policies of a Dto, derived from capability markers.

A Dto subclass opts into a policy by inheriting the matching marker:

    class Settings(ReadOnlyAttributes, ForbidsOverrides, Dto):
        fillable = ['theme', 'language']

Resolution happens once per class and is cached in a process-wide registry.
"""

import threading
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from dtos.logging import logger


class ForbidsOverrides:
    """Marker: an attribute may be set only once."""


class IgnoresUnknownAttributes:
    """Marker: reading a missing attribute yields None instead of raising."""


class ReadOnlyAttributes:
    """Marker: no writes once the container is initialized."""


@dataclass(frozen=True)
class DtoOptions:
    forbid_overrides: bool = False
    ignore_unknown: bool = False
    read_only: bool = False

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def merge(self, partial: Mapping[str, Any]) -> 'DtoOptions':
        """
        Return a copy with the recognized keys of partial applied.

        Values are coerced to bool. Unknown keys are ignored.
        """
        known = self.names()
        changes = {}
        for key, value in partial.items():
            if key in known:
                changes[key] = bool(value)
            else:
                logger.warning(f'Ignoring unknown Dto option {key!r}')
        return replace(self, **changes)

    def to_dict(self) -> dict[str, bool]:
        return {name: getattr(self, name) for name in self.names()}


_MARKERS = {
    'forbid_overrides': ForbidsOverrides,
    'ignore_unknown': IgnoresUnknownAttributes,
    'read_only': ReadOnlyAttributes,
}

_registry: dict[type, DtoOptions] = {}
_registry_lock = threading.Lock()


def _options_from_markers(cls: type) -> DtoOptions:
    return DtoOptions(**{name: issubclass(cls, marker) for name, marker in _MARKERS.items()})


def resolve_options(cls: type) -> DtoOptions:
    """
    Get the options declared by cls, resolving them on first use.

    Args:
        cls: Dto subclass

    Returns:
        DtoOptions shared by all instances of cls
    """
    options = _registry.get(cls)
    if options is not None:
        return options
    with _registry_lock:
        options = _registry.get(cls)
        if options is None:
            options = _options_from_markers(cls)
            _registry[cls] = options
            logger.debug(f'Resolved options for {cls.__qualname__}: {options.to_dict()}')
    return options


def register_type(cls: type) -> DtoOptions:
    """Resolve and cache the options of cls ahead of first use."""
    return resolve_options(cls)


def is_registered(cls: type) -> bool:
    return cls in _registry


def clear_registry() -> None:
    """Forget every resolved class."""
    with _registry_lock:
        _registry.clear()
