"""
DTOs - runtime attribute containers with change tracking and write policies.

    from dtos import Dto, DtoFactory, ReadOnlyAttributes

    class UserDto(ReadOnlyAttributes, Dto):
        fillable = ['name', 'email']

    user = DtoFactory.make({'name': 'Alex', 'age': 30}, UserDto)
    user.name      # 'Alex'
    user.all()     # {'name': 'Alex'}
"""

from dtos.core import (
    AttributeResult,
    Dto,
    DtoOptions,
    DtoProperty,
    ForbidsOverrides,
    IgnoresUnknownAttributes,
    ReadOnlyAttributes,
    quiet_construction,
    register_type,
    resolve_options,
)
from dtos.errors import (
    DtoError,
    DtoNotFoundError,
    InvalidArgumentError,
    InvalidKeyError,
    NotFillableError,
    OverrideForbiddenError,
    ReadOnlyError,
    UnknownAttributeError,
)
from dtos.factory import DtoFactory, make_dto
from dtos.logging import (
    disable_console_logging,
    enable_console_logging,
    logger,
    set_log_level,
)

__version__ = '0.1.0'

__all__ = [
    'AttributeResult',
    'Dto',
    'DtoOptions',
    'DtoProperty',
    'ForbidsOverrides',
    'IgnoresUnknownAttributes',
    'ReadOnlyAttributes',
    'quiet_construction',
    'register_type',
    'resolve_options',
    'DtoError',
    'DtoNotFoundError',
    'InvalidArgumentError',
    'InvalidKeyError',
    'NotFillableError',
    'OverrideForbiddenError',
    'ReadOnlyError',
    'UnknownAttributeError',
    'DtoFactory',
    'make_dto',
    'disable_console_logging',
    'enable_console_logging',
    'logger',
    'set_log_level',
]
