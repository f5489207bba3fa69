"""Update cart item quantity use case."""
import logging

from calendar_commerce.domain.enums import ItemMutationOutcome
from calendar_commerce.domain.exceptions import InvalidArgumentError
from calendar_commerce.domain.identifiers import ItemId, SessionId
from calendar_commerce.domain.ports import CartRepository

from .cart_view import CartView
from .item_guard import log_item_not_in_cart

logger = logging.getLogger(__name__)


class UpdateCartItemQuantityUseCase:
    """Change the quantity of a line in the session's cart."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """Initialize.

        Args:
            cart_repository: Cart repository
        """
        self._cart_repository = cart_repository

    def execute(
        self, session_id: str | SessionId, item_id: str | ItemId, quantity: int
    ) -> CartView:
        """Set a line's quantity.

        A quantity of zero or less removes the line. An item that is not in
        this session's cart is left alone and the caller's cart is returned
        unchanged.

        Args:
            session_id: Session identifier
            item_id: Cart item id
            quantity: New quantity

        Returns:
            Cart projection

        Raises:
            InvalidArgumentError: blank session or item id, non-integer quantity
        """
        session = SessionId.of(session_id)
        target = item_id if isinstance(item_id, ItemId) else ItemId(item_id)
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidArgumentError(f"quantity must be an integer: {quantity!r}")

        with self._cart_repository.session_lock(session):
            cart = self._cart_repository.find_or_create_for_session(session)
            outcome = cart.update_item_quantity(target, quantity)
            if outcome is ItemMutationOutcome.NOT_IN_CART:
                log_item_not_in_cart(cart, target)
                return CartView.from_cart(cart)
            self._cart_repository.save(cart)

        if outcome is ItemMutationOutcome.REMOVED:
            logger.info("Removed item %s from cart %s (quantity %d)", target, cart.cart_id, quantity)
        else:
            logger.info("Set item %s in cart %s to quantity %d", target, cart.cart_id, quantity)
        return CartView.from_cart(cart)
