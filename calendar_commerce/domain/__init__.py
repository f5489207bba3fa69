"""Domain layer."""
from .entities import Cart, CartItem
from .enums import ItemMutationOutcome, ShippingTier
from .exceptions import (
    ConcurrentCartModificationError,
    InvalidArgumentError,
    PolicyRejectedError,
)
from .identifiers import CartId, ItemId, SessionId
from .ports import CartRepository, CatalogProvider
from .services import ShippingRateResolver
from .value_objects import (
    Money,
    Product,
    ShippingOption,
    ShippingQuote,
    ShippingRateTable,
)

__all__ = [
    # Identifiers
    "CartId",
    "ItemId",
    "SessionId",
    # Enums
    "ItemMutationOutcome",
    "ShippingTier",
    # Errors
    "ConcurrentCartModificationError",
    "InvalidArgumentError",
    "PolicyRejectedError",
    # Value Objects
    "Money",
    "Product",
    "ShippingOption",
    "ShippingQuote",
    "ShippingRateTable",
    # Entities
    "Cart",
    "CartItem",
    # Ports
    "CartRepository",
    "CatalogProvider",
    # Services
    "ShippingRateResolver",
]
