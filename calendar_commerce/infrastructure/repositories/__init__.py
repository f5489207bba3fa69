"""Repository module."""
from .dynamodb_cart_repository import DynamoDBCartRepository
from .in_memory_cart_repository import InMemoryCartRepository

__all__ = [
    "DynamoDBCartRepository",
    "InMemoryCartRepository",
]
