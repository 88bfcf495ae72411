"""
Fixtures for DTOs testing.
"""

import logging

import pytest

from dtos.core.options import clear_registry
from tests.sample_dtos import PlainDto, UserDto


@pytest.fixture(autouse=True)
def fresh_registry():
    """Resolve options from scratch in every test."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def dtos_caplog(caplog):
    """caplog capturing everything the 'dtos' logger emits."""
    caplog.set_level(logging.DEBUG, logger='dtos')
    return caplog


@pytest.fixture
def plain():
    return PlainDto({'name': 'Alex', 'age': 30})


@pytest.fixture
def user():
    return UserDto({'name': 'Alex'})
