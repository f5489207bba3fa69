"""Provider module."""
from .static_product_catalog import (
    DEFAULT_PRODUCT_CODE,
    DEFAULT_PRODUCTS,
    StaticProductCatalog,
)

__all__ = [
    "DEFAULT_PRODUCT_CODE",
    "DEFAULT_PRODUCTS",
    "StaticProductCatalog",
]
