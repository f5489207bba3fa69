"""Dependency injection container."""
from calendar_commerce.config import CommerceSettings
from calendar_commerce.domain.ports import CartRepository, CatalogProvider
from calendar_commerce.domain.services import ShippingRateResolver
from calendar_commerce.infrastructure import (
    DynamoDBCartRepository,
    InMemoryCartRepository,
    StaticProductCatalog,
)


class Dependencies:
    """Holds the shared collaborators of the use cases.

    When CART_TABLE_NAME is set the DynamoDB repository is used, otherwise the
    in-memory one (local development and tests).
    """

    _settings: CommerceSettings | None = None
    _cart_repository: CartRepository | None = None
    _catalog_provider: CatalogProvider | None = None
    _shipping_rate_resolver: ShippingRateResolver | None = None

    @classmethod
    def get_settings(cls) -> CommerceSettings:
        """Get settings (read from the environment once)."""
        if cls._settings is None:
            cls._settings = CommerceSettings.from_env()
        return cls._settings

    @classmethod
    def set_settings(cls, settings: CommerceSettings) -> None:
        """Set settings (for tests)."""
        cls._settings = settings

    @classmethod
    def get_cart_repository(cls) -> CartRepository:
        """Get the cart repository."""
        if cls._cart_repository is None:
            settings = cls.get_settings()
            if settings.use_dynamodb:
                cls._cart_repository = DynamoDBCartRepository(settings.cart_table_name)
            else:
                cls._cart_repository = InMemoryCartRepository()
        return cls._cart_repository

    @classmethod
    def set_cart_repository(cls, repository: CartRepository) -> None:
        """Set the cart repository (for tests)."""
        cls._cart_repository = repository

    @classmethod
    def get_catalog_provider(cls) -> CatalogProvider:
        """Get the product catalog."""
        if cls._catalog_provider is None:
            cls._catalog_provider = StaticProductCatalog()
        return cls._catalog_provider

    @classmethod
    def set_catalog_provider(cls, catalog: CatalogProvider) -> None:
        """Set the product catalog (for tests)."""
        cls._catalog_provider = catalog

    @classmethod
    def get_shipping_rate_resolver(cls) -> ShippingRateResolver:
        """Get the shipping rate resolver."""
        if cls._shipping_rate_resolver is None:
            cls._shipping_rate_resolver = ShippingRateResolver(cls.get_settings().shipping_rates)
        return cls._shipping_rate_resolver

    @classmethod
    def set_shipping_rate_resolver(cls, resolver: ShippingRateResolver) -> None:
        """Set the shipping rate resolver (for tests)."""
        cls._shipping_rate_resolver = resolver

    @classmethod
    def reset(cls) -> None:
        """Drop every cached dependency (for tests)."""
        cls._settings = None
        cls._cart_repository = None
        cls._catalog_provider = None
        cls._shipping_rate_resolver = None
