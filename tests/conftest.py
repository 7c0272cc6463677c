"""Configuration for all tests - asyncio backend only."""

import pytest

from crudmixin import Bundle

# load the AnyIO pytest plugin even if plugin autoload is disabled
pytest_plugins = ("anyio",)


@pytest.fixture(scope="session")
def anyio_backend():
    """Force tests to run only on asyncio backend."""
    return "asyncio"


def make_ops():
    def make():
        pass

    def get():
        pass

    def set():
        pass

    def del_():
        pass

    return {"make": make, "get": get, "set": set, "del": del_}


@pytest.fixture
def full_bundle():
    """Factory for bundles with all four operations filled."""

    def _factory(type_: str = "TestType") -> Bundle:
        return Bundle(type_, make_ops())

    return _factory
