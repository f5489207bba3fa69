"""Cart repository interface."""
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from ..entities import Cart, CartItem
from ..identifiers import CartId, ItemId, SessionId


class CartRepository(ABC):
    """Cart repository interface.

    Carts are saved and loaded as whole aggregates; items are persisted and
    deleted together with their cart.
    """

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Save the cart and all of its items."""
        pass

    @abstractmethod
    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """Find a cart by id."""
        pass

    @abstractmethod
    def find_by_session_id(self, session_id: SessionId) -> Cart | None:
        """Find the cart owned by a session."""
        pass

    @abstractmethod
    def find_or_create_for_session(self, session_id: SessionId) -> Cart:
        """Return the session's cart, creating and saving an empty one if needed."""
        pass

    @abstractmethod
    def find_item_by_id(self, item_id: ItemId) -> CartItem | None:
        """Find an item in any cart."""
        pass

    @abstractmethod
    def delete(self, cart_id: CartId) -> None:
        """Delete a cart and its items."""
        pass

    @abstractmethod
    def session_lock(self, session_id: SessionId) -> AbstractContextManager:
        """Context manager serializing mutations of one session's cart."""
        pass
