"""Infrastructure layer."""
from .providers import StaticProductCatalog
from .repositories import DynamoDBCartRepository, InMemoryCartRepository

__all__ = [
    "DynamoDBCartRepository",
    "InMemoryCartRepository",
    "StaticProductCatalog",
]
