# tests/conftest.py
import pytest

from objectvalidator import config, resources


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def restore_globals():
    """Undo settings overrides and custom resource lookups after each test."""
    yield
    config.reset()
    resources.set_resource_lookup(None)
