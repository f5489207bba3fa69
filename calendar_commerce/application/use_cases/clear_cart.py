"""Clear cart use case."""
import logging

from calendar_commerce.domain.identifiers import SessionId
from calendar_commerce.domain.ports import CartRepository

from .cart_view import CartView

logger = logging.getLogger(__name__)


class ClearCartUseCase:
    """Remove every line from the session's cart."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """Initialize.

        Args:
            cart_repository: Cart repository
        """
        self._cart_repository = cart_repository

    def execute(self, session_id: str | SessionId) -> CartView:
        """Clear the cart. Succeeds on an already empty cart.

        Args:
            session_id: Session identifier

        Returns:
            Empty cart projection

        Raises:
            InvalidArgumentError: session_id is empty or blank
        """
        session = SessionId.of(session_id)

        with self._cart_repository.session_lock(session):
            cart = self._cart_repository.find_or_create_for_session(session)
            removed = cart.get_line_count()
            cart.clear()
            self._cart_repository.save(cart)

        logger.info("Cleared %d line(s) from cart %s", removed, cart.cart_id)
        return CartView.from_cart(cart)
