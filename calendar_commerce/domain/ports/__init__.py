"""Port module."""
from .cart_repository import CartRepository
from .catalog_provider import CatalogProvider

__all__ = [
    "CartRepository",
    "CatalogProvider",
]
