"""
Unit tests for DtoOptions, capability markers and the options registry.
"""

import threading

import pytest

from dtos import DtoOptions, register_type, resolve_options
from dtos.core.options import clear_registry, is_registered
from tests.sample_dtos import (
    LenientDto,
    LockedUserDto,
    PlainDto,
    ReadOnlyDto,
    StrictDto,
)


class TestDtoOptions:

    def test_defaults_are_off(self):
        options = DtoOptions()
        assert options.to_dict() == {
            'forbid_overrides': False,
            'ignore_unknown': False,
            'read_only': False,
        }

    def test_merge_coerces_to_bool(self):
        options = DtoOptions().merge({'read_only': 1, 'ignore_unknown': 'yes'})
        assert options.read_only is True
        assert options.ignore_unknown is True
        assert options.forbid_overrides is False

    def test_merge_returns_new_record(self):
        options = DtoOptions()
        merged = options.merge({'read_only': True})
        assert options.read_only is False
        assert merged.read_only is True

    def test_merge_ignores_unknown_keys(self, dtos_caplog):
        options = DtoOptions().merge({'frozen': True, 'read_only': 0})
        assert options == DtoOptions()
        assert "Ignoring unknown Dto option 'frozen'" in dtos_caplog.text

    def test_options_are_immutable(self):
        with pytest.raises(AttributeError):
            DtoOptions().read_only = True


class TestResolveOptions:

    @pytest.mark.parametrize('cls, expected', [
        (PlainDto, DtoOptions()),
        (ReadOnlyDto, DtoOptions(read_only=True)),
        (StrictDto, DtoOptions(forbid_overrides=True)),
        (LenientDto, DtoOptions(ignore_unknown=True)),
        (LockedUserDto, DtoOptions(forbid_overrides=True, ignore_unknown=True, read_only=True)),
    ])
    def test_markers_map_to_options(self, cls, expected):
        assert resolve_options(cls) == expected

    def test_markers_are_inherited(self):
        class ChildOfReadOnly(ReadOnlyDto):
            pass

        assert resolve_options(ChildOfReadOnly).read_only is True

    def test_resolved_once_per_class(self, dtos_caplog):
        first = resolve_options(StrictDto)
        second = resolve_options(StrictDto)
        assert first is second
        assert dtos_caplog.text.count('Resolved options for StrictDto') == 1

    def test_register_type(self):
        assert not is_registered(ReadOnlyDto)
        assert register_type(ReadOnlyDto).read_only is True
        assert is_registered(ReadOnlyDto)
        clear_registry()
        assert not is_registered(ReadOnlyDto)

    def test_concurrent_first_use_resolves_once(self):
        results = []

        def worker():
            results.append(resolve_options(LockedUserDto))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)
