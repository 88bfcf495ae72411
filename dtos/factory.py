"""
DtoFactory - Build Dto objects from mappings, pairs, plain objects, JSON and YAML.

Construction is quiet: entries that a Dto rejects (not fillable, invalid
name, ...) are dropped instead of aborting. Only structural problems, an
unusable class or an empty source, raise InvalidArgumentError.
"""

import importlib
import inspect
import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, IO, Optional, Union

import yaml

from dtos.core.dto import Dto, quiet_construction
from dtos.core.property import is_numeric_key
from dtos.errors import DtoNotFoundError, InvalidArgumentError
from dtos.logging import logger

DtoClass = Union[type[Dto], str]


class DtoFactory:

    @classmethod
    def make(cls, source: Any, dto_class: Optional[DtoClass] = None) -> Dto:
        """
        Build a dto_class instance from source.

        Args:
            source: Mapping, Dto, iterable of (name, value) pairs or plain object
            dto_class: Dto subclass, or its import path ('pkg.module.Class'
                       or 'pkg.module:Class')

        Returns:
            The new Dto, no longer silent

        Raises:
            InvalidArgumentError: Bad dto_class or nothing to fill it with
            DtoNotFoundError: dto_class is a path that cannot be imported

        Example:
            user = DtoFactory.make({'name': 'Alex', 'age': 30}, UserDto)
        """
        dto_class = cls.validate_dto_class(dto_class)
        data = cls.normalize(source)

        if not data:
            raise InvalidArgumentError('Non-empty attributes must be provided')

        with quiet_construction():
            dto = dto_class(data)
        dto.should_be_silent(False)

        logger.debug(f'Built {dto_class.__qualname__} with {len(dto)} of {len(data)} attributes')
        return dto

    @classmethod
    def from_json(cls, text: Union[str, bytes], dto_class: Optional[DtoClass] = None) -> Dto:
        """Build a Dto from a JSON object."""
        try:
            data = json.loads(text)
        except ValueError as error:
            raise InvalidArgumentError(f'Invalid JSON: {error}') from error
        if not isinstance(data, dict):
            raise InvalidArgumentError('JSON source must be an object')
        return cls.make(data, dto_class)

    @classmethod
    def from_yaml(cls, source: Union[str, Path, IO], dto_class: Optional[DtoClass] = None) -> Dto:
        """
        Build a Dto from a YAML mapping.

        Args:
            source: YAML text, an open stream, or a Path to a YAML file
            dto_class: Target Dto class
        """
        try:
            if isinstance(source, Path):
                with open(source, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f)
            else:
                data = yaml.safe_load(source)
        except yaml.YAMLError as error:
            raise InvalidArgumentError(f'Invalid YAML: {error}') from error
        if not isinstance(data, dict):
            raise InvalidArgumentError('YAML source must be a mapping')
        return cls.make(data, dto_class)

    @classmethod
    def normalize(cls, source: Any) -> dict[str, Any]:
        """
        Turn source into a flat name -> value dict.

        Mappings are taken as they are. Pairs and object fields keep only
        non-numeric string names.
        """
        if isinstance(source, Dto):
            return source.all()
        if isinstance(source, Mapping):
            return dict(source)
        if isinstance(source, (str, bytes, bytearray)):
            raise InvalidArgumentError(f'Cannot read attributes from {type(source).__name__}')
        if isinstance(source, Iterable):
            return cls._filter_keys(cls._pairs(source))
        return cls._filter_keys(cls._object_fields(source).items())

    @staticmethod
    def _pairs(source: Iterable) -> list[tuple[Any, Any]]:
        pairs = []
        for item in source:
            try:
                key, value = item
            except (TypeError, ValueError) as error:
                raise InvalidArgumentError(f'Expected (name, value) pairs, got {item!r}') from error
            pairs.append((key, value))
        return pairs

    @staticmethod
    def _object_fields(source: Any) -> dict[str, Any]:
        if hasattr(source, '__dict__'):
            fields = dict(vars(source))
        else:
            slots = getattr(type(source), '__slots__', ())
            if isinstance(slots, str):
                slots = (slots,)
            fields = {name: getattr(source, name) for name in slots if hasattr(source, name)}
        return {name: value for name, value in fields.items() if not name.startswith('_')}

    @staticmethod
    def _filter_keys(items: Iterable[tuple[Any, Any]]) -> dict[str, Any]:
        data = {}
        for key, value in items:
            if isinstance(key, str) and not is_numeric_key(key):
                data[key] = value
            else:
                logger.debug(f'Dropping attribute with non-string or numeric key {key!r}')
        return data

    @classmethod
    def validate_dto_class(cls, dto_class: Optional[DtoClass]) -> type[Dto]:
        """
        Check that dto_class can be built by the factory.

        Returns:
            The class, imported first if given as a path
        """
        if dto_class is None or (isinstance(dto_class, str) and not dto_class.strip()):
            raise InvalidArgumentError('Dto class must be provided')

        if isinstance(dto_class, str):
            dto_class = cls._import_class(dto_class)

        if not inspect.isclass(dto_class):
            raise InvalidArgumentError(f'Dto class {dto_class!r} is not a class')

        if dto_class is Dto or not issubclass(dto_class, Dto):
            raise InvalidArgumentError(f'Dto class {dto_class.__qualname__} must extend dtos.Dto')

        if inspect.isabstract(dto_class):
            raise InvalidArgumentError(f'Dto class {dto_class.__qualname__} must be instantiable')

        return dto_class

    @staticmethod
    def _import_class(class_path: str) -> Any:
        if ':' in class_path:
            class_module, class_name = class_path.split(':', 1)
        elif '.' in class_path:
            class_module, class_name = class_path.rsplit('.', 1)
        else:
            raise DtoNotFoundError(class_path)
        try:
            module = importlib.import_module(class_module)
        except ImportError as error:
            raise DtoNotFoundError(class_path) from error
        try:
            return getattr(module, class_name)
        except AttributeError as error:
            raise DtoNotFoundError(class_path) from error


def make_dto(source: Any, dto_class: Optional[DtoClass] = None) -> Dto:
    """Shortcut for DtoFactory.make()."""
    return DtoFactory.make(source, dto_class)
