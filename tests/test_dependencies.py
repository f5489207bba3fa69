"""Dependencies container tests."""
from decimal import Decimal
from unittest.mock import patch

import pytest

from calendar_commerce.config import CommerceSettings
from calendar_commerce.dependencies import Dependencies
from calendar_commerce.infrastructure import (
    DynamoDBCartRepository,
    InMemoryCartRepository,
    StaticProductCatalog,
)


@pytest.fixture(autouse=True)
def reset_dependencies():
    """Reset dependencies around each test."""
    Dependencies.reset()
    yield
    Dependencies.reset()


class TestDependencies:
    """Dependencies unit tests."""

    def test_in_memory_repository_without_table(self) -> None:
        Dependencies.set_settings(CommerceSettings.from_env({}))
        repository = Dependencies.get_cart_repository()
        assert isinstance(repository, InMemoryCartRepository)
        assert Dependencies.get_cart_repository() is repository

    def test_dynamodb_repository_with_table(self) -> None:
        Dependencies.set_settings(CommerceSettings.from_env({"CART_TABLE_NAME": "carts"}))
        with patch.object(DynamoDBCartRepository, "__init__", return_value=None) as init:
            repository = Dependencies.get_cart_repository()
        assert isinstance(repository, DynamoDBCartRepository)
        init.assert_called_once_with("carts")

    def test_catalog_defaults_to_static_catalog(self) -> None:
        assert isinstance(Dependencies.get_catalog_provider(), StaticProductCatalog)

    def test_resolver_uses_configured_rates(self) -> None:
        Dependencies.set_settings(
            CommerceSettings.from_env({"CALENDAR_SHIPPING_DOMESTIC_STANDARD": "4.00"})
        )
        resolver = Dependencies.get_shipping_rate_resolver()
        assert resolver.resolve({"country": "US"}).value == Decimal("4.00")

    def test_overrides_and_reset(self) -> None:
        repository = InMemoryCartRepository()
        Dependencies.set_cart_repository(repository)
        assert Dependencies.get_cart_repository() is repository
        Dependencies.reset()
        Dependencies.set_settings(CommerceSettings.from_env({}))
        assert Dependencies.get_cart_repository() is not repository
