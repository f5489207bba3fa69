"""Remove from cart use case."""
import logging

from calendar_commerce.domain.enums import ItemMutationOutcome
from calendar_commerce.domain.identifiers import ItemId, SessionId
from calendar_commerce.domain.ports import CartRepository

from .cart_view import CartView
from .item_guard import log_item_not_in_cart

logger = logging.getLogger(__name__)


class RemoveFromCartUseCase:
    """Remove a line from the session's cart. Idempotent."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """Initialize.

        Args:
            cart_repository: Cart repository
        """
        self._cart_repository = cart_repository

    def execute(self, session_id: str | SessionId, item_id: str | ItemId) -> CartView:
        """Remove the item if it is in this session's cart.

        Args:
            session_id: Session identifier
            item_id: Cart item id

        Returns:
            Cart projection

        Raises:
            InvalidArgumentError: blank session or item id
        """
        session = SessionId.of(session_id)
        target = item_id if isinstance(item_id, ItemId) else ItemId(item_id)

        with self._cart_repository.session_lock(session):
            cart = self._cart_repository.find_or_create_for_session(session)
            outcome = cart.remove_item(target)
            if outcome is ItemMutationOutcome.NOT_IN_CART:
                log_item_not_in_cart(cart, target)
                return CartView.from_cart(cart)
            self._cart_repository.save(cart)

        logger.info("Removed item %s from cart %s", target, cart.cart_id)
        return CartView.from_cart(cart)
