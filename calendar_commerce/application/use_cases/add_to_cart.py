"""Add to cart use case."""
import logging
from decimal import Decimal

from calendar_commerce.domain.exceptions import InvalidArgumentError
from calendar_commerce.domain.identifiers import SessionId
from calendar_commerce.domain.ports import CartRepository, CatalogProvider
from calendar_commerce.domain.value_objects import Money

from .cart_view import CartView

logger = logging.getLogger(__name__)


class AddToCartUseCase:
    """Add a calendar to the session's cart."""

    def __init__(self, cart_repository: CartRepository, catalog: CatalogProvider) -> None:
        """Initialize.

        Args:
            cart_repository: Cart repository
            catalog: Product catalog used for price defaulting
        """
        self._cart_repository = cart_repository
        self._catalog = catalog

    def execute(
        self,
        session_id: str | SessionId,
        product_code: str | None = None,
        template_id: str | None = None,
        display_name: str | None = None,
        year: int | None = None,
        quantity: int | None = None,
        unit_price: Money | Decimal | str | None = None,
        configuration: str | None = None,
        generator_type: str | None = None,
    ) -> CartView:
        """Add an item, merging into a matching line when one exists.

        Price resolution: an explicit unit_price wins, then the catalog price
        of product_code, then the default product's price. The resolved price
        is stored on the line and never recomputed.

        Args:
            session_id: Session identifier
            product_code: Catalog product code (default product when omitted)
            template_id: Calendar template reference
            display_name: Line label (defaults to "Calendar {year}")
            year: Calendar year
            quantity: Quantity (defaults to 1, no upper bound)
            unit_price: Explicit unit price
            configuration: Opaque serialized calendar configuration
            generator_type: Set for generated items, which never merge

        Returns:
            Cart projection after the add

        Raises:
            InvalidArgumentError: blank session, quantity below 1, negative
                price, or unknown product code without an explicit price
        """
        session = SessionId.of(session_id)
        quantity = 1 if quantity is None else quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidArgumentError(f"quantity must be a positive integer: {quantity!r}")

        resolved_code, price = self._resolve_price(product_code, unit_price)
        if not display_name or not display_name.strip():
            display_name = f"Calendar {year}" if year is not None else "Calendar"

        with self._cart_repository.session_lock(session):
            cart = self._cart_repository.find_or_create_for_session(session)
            item = cart.add_item(
                product_code=resolved_code,
                display_name=display_name,
                unit_price=price,
                quantity=quantity,
                year=year,
                template_id=template_id,
                configuration=configuration,
                generator_type=generator_type,
            )
            self._cart_repository.save(cart)

        logger.info(
            "Added %d x %s to cart %s (item %s, now quantity %d)",
            quantity, resolved_code, cart.cart_id, item.item_id, item.quantity,
        )
        return CartView.from_cart(cart)

    def _resolve_price(
        self, product_code: str | None, unit_price: Money | Decimal | str | None
    ) -> tuple[str, Money]:
        """Return (product code, unit price) for a new line."""
        if unit_price is not None:
            price = unit_price if isinstance(unit_price, Money) else Money.of(unit_price)
            code = product_code or self._catalog.default_code()
            logger.warning("Using client-provided price %s for product '%s'", price, code)
            return code, price

        if product_code is not None:
            price = self._catalog.price(product_code)
            logger.info("Using price from product catalog for '%s': %s", product_code, price)
            return product_code, price

        code = self._catalog.default_code()
        price = self._catalog.price(code)
        logger.info("Using default product '%s' price: %s", code, price)
        return code, price
