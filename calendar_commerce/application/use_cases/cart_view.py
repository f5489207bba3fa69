"""Cart projection returned by every cart use case."""
from __future__ import annotations

from dataclasses import dataclass

from calendar_commerce.domain.entities import Cart, CartItem
from calendar_commerce.domain.value_objects import Money

# Tax is not calculated yet; every projection reports zero.
TAX_PLACEHOLDER = Money.zero()


@dataclass(frozen=True)
class CartItemView:
    """Cart line DTO."""

    id: str
    product_ref: str
    product_code: str
    template_id: str | None
    display_name: str
    year: int | None
    quantity: int
    unit_price: Money
    line_total: Money
    configuration: str | None
    generator_type: str | None

    @classmethod
    def from_item(cls, item: CartItem) -> CartItemView:
        return cls(
            id=str(item.item_id),
            product_ref=item.get_product_ref(),
            product_code=item.product_code,
            template_id=item.template_id,
            display_name=item.display_name,
            year=item.year,
            quantity=item.quantity,
            unit_price=item.unit_price,
            line_total=item.get_line_total(),
            configuration=item.configuration,
            generator_type=item.generator_type,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "productRef": self.product_ref,
            "productCode": self.product_code,
            "displayName": self.display_name,
            "year": self.year,
            "quantity": self.quantity,
            "unitPrice": self.unit_price.value,
            "lineTotal": self.line_total.value,
            "configuration": self.configuration,
        }


@dataclass(frozen=True)
class CartView:
    """External read view of a cart, built from post-mutation state."""

    id: str
    subtotal: Money
    tax_amount: Money
    total_amount: Money
    item_count: int
    items: list[CartItemView]

    @classmethod
    def from_cart(cls, cart: Cart) -> CartView:
        """Project a cart aggregate.

        Args:
            cart: Cart aggregate

        Returns:
            Projection with subtotal, zero tax, total and item count
        """
        subtotal = cart.get_subtotal()
        return cls(
            id=str(cart.cart_id),
            subtotal=subtotal,
            tax_amount=TAX_PLACEHOLDER,
            total_amount=subtotal.add(TAX_PLACEHOLDER),
            item_count=cart.get_item_count(),
            items=[CartItemView.from_item(item) for item in cart.get_items()],
        )

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> dict:
        """External shape; amounts stay Decimal (serialize with default=str)."""
        return {
            "id": self.id,
            "subtotal": self.subtotal.value,
            "taxAmount": self.tax_amount.value,
            "totalAmount": self.total_amount.value,
            "itemCount": self.item_count,
            "items": [item.to_dict() for item in self.items],
        }
