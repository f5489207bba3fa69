"""Shared fixtures for the use case tests."""
import pytest

from calendar_commerce.infrastructure.providers import StaticProductCatalog
from calendar_commerce.infrastructure.repositories import InMemoryCartRepository


@pytest.fixture
def repository() -> InMemoryCartRepository:
    return InMemoryCartRepository()


@pytest.fixture
def catalog() -> StaticProductCatalog:
    return StaticProductCatalog()
