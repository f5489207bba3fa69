"""Identifier module."""
from .cart_id import CartId
from .item_id import ItemId
from .session_id import SessionId

__all__ = [
    "CartId",
    "ItemId",
    "SessionId",
]
