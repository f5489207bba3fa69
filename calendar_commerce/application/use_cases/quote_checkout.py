"""Checkout pricing use case."""
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from calendar_commerce.domain.exceptions import InvalidArgumentError
from calendar_commerce.domain.identifiers import CartId, SessionId
from calendar_commerce.domain.ports import CartRepository
from calendar_commerce.domain.services import ShippingRateResolver
from calendar_commerce.domain.value_objects import Money

from .cart_view import TAX_PLACEHOLDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutQuote:
    """Order total presented to payment."""

    cart_id: CartId
    country: str
    subtotal: Money
    tax_amount: Money
    shipping_amount: Money
    total_amount: Money
    item_count: int

    def to_dict(self) -> dict:
        return {
            "cartId": str(self.cart_id),
            "country": self.country,
            "subtotal": self.subtotal.value,
            "taxAmount": self.tax_amount.value,
            "shippingAmount": self.shipping_amount.value,
            "totalAmount": self.total_amount.value,
            "itemCount": self.item_count,
        }


class QuoteCheckoutUseCase:
    """Price the session's cart for a destination: subtotal + tax + shipping."""

    def __init__(
        self,
        cart_repository: CartRepository,
        shipping_rate_resolver: ShippingRateResolver,
    ) -> None:
        """Initialize.

        Args:
            cart_repository: Cart repository
            shipping_rate_resolver: Shipping rate resolver
        """
        self._cart_repository = cart_repository
        self._shipping_rate_resolver = shipping_rate_resolver

    def execute(
        self, session_id: str | SessionId, shipping_address: Mapping[str, Any] | None
    ) -> CheckoutQuote:
        """Compute the order total.

        Args:
            session_id: Session identifier
            shipping_address: Destination with at least a "country" field

        Returns:
            Checkout quote

        Raises:
            InvalidArgumentError: blank session, empty cart, or a missing or
                blank address/country
            PolicyRejectedError: destination outside the US
        """
        session = SessionId.of(session_id)
        cart = self._cart_repository.find_or_create_for_session(session)
        if cart.is_empty():
            raise InvalidArgumentError("cart is empty")

        shipping = self._shipping_rate_resolver.quote(shipping_address)
        subtotal = cart.get_subtotal()
        total = subtotal.add(TAX_PLACEHOLDER).add(shipping.amount)

        logger.info(
            "Checkout quote for cart %s: total %s (subtotal %s, tax %s, shipping %s)",
            cart.cart_id, total, subtotal, TAX_PLACEHOLDER, shipping.amount,
        )
        return CheckoutQuote(
            cart_id=cart.cart_id,
            country=shipping.country,
            subtotal=subtotal,
            tax_amount=TAX_PLACEHOLDER,
            shipping_amount=shipping.amount,
            total_amount=total,
            item_count=cart.get_item_count(),
        )
