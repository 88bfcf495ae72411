"""
Core data structures for DTOs - the container, its properties and its policies.
"""

from dtos.core.property import DtoProperty
from dtos.core.options import (
    DtoOptions,
    ForbidsOverrides,
    IgnoresUnknownAttributes,
    ReadOnlyAttributes,
    resolve_options,
    register_type,
)
from dtos.core.result import AttributeResult
from dtos.core.dto import Dto, quiet_construction

__all__ = [
    'DtoProperty',
    'DtoOptions',
    'ForbidsOverrides',
    'IgnoresUnknownAttributes',
    'ReadOnlyAttributes',
    'resolve_options',
    'register_type',
    'AttributeResult',
    'Dto',
    'quiet_construction',
]
