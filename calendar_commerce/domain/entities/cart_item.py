"""Cart item entity."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..identifiers import CartId, ItemId
from ..value_objects import Money


@dataclass
class CartItem:
    """One priced, quantified line in a cart.

    The unit price is captured when the line is added and never recomputed
    from the catalog, so later catalog price changes leave open carts alone.
    """

    item_id: ItemId
    cart_id: CartId
    product_code: str
    display_name: str
    quantity: int
    unit_price: Money
    year: int | None = None
    template_id: str | None = None
    configuration: str | None = None
    generator_type: str | None = None
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate."""
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @classmethod
    def create(
        cls,
        cart_id: CartId,
        product_code: str,
        display_name: str,
        quantity: int,
        unit_price: Money,
        year: int | None = None,
        template_id: str | None = None,
        configuration: str | None = None,
        generator_type: str | None = None,
    ) -> CartItem:
        """Create a new line item."""
        return cls(
            item_id=ItemId.generate(),
            cart_id=cart_id,
            product_code=product_code,
            display_name=display_name,
            quantity=quantity,
            unit_price=unit_price,
            year=year,
            template_id=template_id,
            configuration=configuration,
            generator_type=generator_type,
        )

    def get_line_total(self) -> Money:
        """unit_price x quantity."""
        return self.unit_price.multiply(self.quantity)

    def get_product_ref(self) -> str:
        """Template reference when present, product code otherwise."""
        return self.template_id or self.product_code

    def matches(
        self,
        template_id: str | None,
        product_code: str,
        year: int | None,
        configuration: str | None,
    ) -> bool:
        """Whether an add with these attributes targets this same line.

        Generated items never match; their artwork is unique per add.
        """
        if self.generator_type is not None:
            return False
        return (
            self.template_id == template_id
            and self.product_code == product_code
            and self.year == year
            and self.configuration == configuration
        )

    def change_quantity(self, quantity: int) -> None:
        """Set a new quantity (must be at least 1)."""
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")
        self.quantity = quantity
