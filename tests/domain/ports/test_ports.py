"""Port (CartRepository, CatalogProvider) tests."""
from abc import ABC

import pytest

from calendar_commerce.domain.ports import CartRepository, CatalogProvider
from calendar_commerce.infrastructure import (
    DynamoDBCartRepository,
    InMemoryCartRepository,
    StaticProductCatalog,
)


class TestCartRepository:
    """CartRepository interface tests."""

    def test_is_abstract(self) -> None:
        assert issubclass(CartRepository, ABC)
        with pytest.raises(TypeError):
            CartRepository()

    def test_implementations(self) -> None:
        assert issubclass(InMemoryCartRepository, CartRepository)
        assert issubclass(DynamoDBCartRepository, CartRepository)

    def test_abstract_methods(self) -> None:
        assert CartRepository.__abstractmethods__ == {
            "save",
            "find_by_id",
            "find_by_session_id",
            "find_or_create_for_session",
            "find_item_by_id",
            "delete",
            "session_lock",
        }


class TestCatalogProvider:
    """CatalogProvider interface tests."""

    def test_is_abstract(self) -> None:
        assert issubclass(CatalogProvider, ABC)
        with pytest.raises(TypeError):
            CatalogProvider()

    def test_implementation(self) -> None:
        assert issubclass(StaticProductCatalog, CatalogProvider)
