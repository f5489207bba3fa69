"""Get cart use case."""
from calendar_commerce.domain.identifiers import SessionId
from calendar_commerce.domain.ports import CartRepository

from .cart_view import CartView


class GetCartUseCase:
    """Return the session's cart, creating an empty one on first access."""

    def __init__(self, cart_repository: CartRepository) -> None:
        """Initialize.

        Args:
            cart_repository: Cart repository
        """
        self._cart_repository = cart_repository

    def execute(self, session_id: str | SessionId) -> CartView:
        """Get or create the cart.

        Args:
            session_id: Session identifier

        Returns:
            Cart projection

        Raises:
            InvalidArgumentError: session_id is empty or blank
        """
        session = SessionId.of(session_id)
        cart = self._cart_repository.find_or_create_for_session(session)
        return CartView.from_cart(cart)
