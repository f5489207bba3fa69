"""In-memory cart repository."""
import copy
import threading
from contextlib import AbstractContextManager

from calendar_commerce.domain.entities import Cart, CartItem
from calendar_commerce.domain.identifiers import CartId, ItemId, SessionId
from calendar_commerce.domain.ports import CartRepository


class InMemoryCartRepository(CartRepository):
    """In-memory cart repository (local development and tests).

    Stores deep copies, so a mutation that fails before save() never leaks
    into stored state.
    """

    def __init__(self) -> None:
        """Initialize."""
        self._carts: dict[str, Cart] = {}
        self._cart_ids_by_session: dict[str, str] = {}
        self._registry_lock = threading.Lock()
        self._session_locks: dict[str, threading.RLock] = {}

    def save(self, cart: Cart) -> None:
        """Save the cart."""
        with self._registry_lock:
            stored = copy.deepcopy(cart)
            stored.version = cart.version + 1
            cart.version = stored.version
            self._carts[cart.cart_id.value] = stored
            self._cart_ids_by_session[cart.session_id.value] = cart.cart_id.value

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """Find a cart by id."""
        with self._registry_lock:
            cart = self._carts.get(cart_id.value)
            return copy.deepcopy(cart) if cart is not None else None

    def find_by_session_id(self, session_id: SessionId) -> Cart | None:
        """Find the cart owned by a session."""
        with self._registry_lock:
            cart_id = self._cart_ids_by_session.get(session_id.value)
            if cart_id is None:
                return None
            return copy.deepcopy(self._carts[cart_id])

    def find_or_create_for_session(self, session_id: SessionId) -> Cart:
        """Return the session's cart, creating one if needed."""
        with self.session_lock(session_id):
            cart = self.find_by_session_id(session_id)
            if cart is None:
                cart = Cart.create(session_id)
                self.save(cart)
            return cart

    def find_item_by_id(self, item_id: ItemId) -> CartItem | None:
        """Find an item in any cart."""
        with self._registry_lock:
            for cart in self._carts.values():
                item = cart.get_item(item_id)
                if item is not None:
                    return copy.deepcopy(item)
        return None

    def delete(self, cart_id: CartId) -> None:
        """Delete a cart."""
        with self._registry_lock:
            cart = self._carts.pop(cart_id.value, None)
            if cart is not None:
                self._cart_ids_by_session.pop(cart.session_id.value, None)
                self._session_locks.pop(cart.session_id.value, None)

    def session_lock(self, session_id: SessionId) -> AbstractContextManager:
        """Per-session re-entrant lock."""
        with self._registry_lock:
            lock = self._session_locks.get(session_id.value)
            if lock is None:
                lock = threading.RLock()
                self._session_locks[session_id.value] = lock
            return lock
