"""Cart aggregate root."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ..enums import ItemMutationOutcome
from ..identifiers import CartId, ItemId, SessionId
from ..value_objects import Money

from .cart_item import CartItem


@dataclass
class Cart:
    """Pending purchase lines for one session (aggregate root).

    Pure domain state: no I/O. Repositories load and save the whole aggregate,
    items included.
    """

    cart_id: CartId
    session_id: SessionId
    _items: list[CartItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 0

    @classmethod
    def create(cls, session_id: SessionId) -> Cart:
        """Create an empty cart for a session."""
        now = datetime.now(timezone.utc)
        return cls(
            cart_id=CartId.generate(),
            session_id=session_id,
            _items=[],
            created_at=now,
            updated_at=now,
        )

    def add_item(
        self,
        product_code: str,
        display_name: str,
        unit_price: Money,
        quantity: int = 1,
        year: int | None = None,
        template_id: str | None = None,
        configuration: str | None = None,
        generator_type: str | None = None,
    ) -> CartItem:
        """Add a line, or merge into an existing matching line.

        A line matches on (template_id, product_code, year, configuration).
        A merge adds the quantity and keeps the existing line's price.
        """
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")

        if generator_type is None:
            for existing in self._items:
                if existing.matches(template_id, product_code, year, configuration):
                    existing.change_quantity(existing.quantity + quantity)
                    self._touch()
                    return existing

        item = CartItem.create(
            cart_id=self.cart_id,
            product_code=product_code,
            display_name=display_name,
            quantity=quantity,
            unit_price=unit_price,
            year=year,
            template_id=template_id,
            configuration=configuration,
            generator_type=generator_type,
        )
        self._items.append(item)
        self._touch()
        return item

    def update_item_quantity(self, item_id: ItemId, quantity: int) -> ItemMutationOutcome:
        """Set a line's quantity; zero or less removes the line."""
        item = self.get_item(item_id)
        if item is None:
            return ItemMutationOutcome.NOT_IN_CART
        if quantity <= 0:
            self._items.remove(item)
            self._touch()
            return ItemMutationOutcome.REMOVED
        item.change_quantity(quantity)
        self._touch()
        return ItemMutationOutcome.UPDATED

    def remove_item(self, item_id: ItemId) -> ItemMutationOutcome:
        """Remove a line. Removing an absent line is a no-op."""
        item = self.get_item(item_id)
        if item is None:
            return ItemMutationOutcome.NOT_IN_CART
        self._items.remove(item)
        self._touch()
        return ItemMutationOutcome.REMOVED

    def clear(self) -> None:
        """Remove every line."""
        self._items.clear()
        self._touch()

    def owns(self, item: CartItem) -> bool:
        """Whether the item belongs to this cart."""
        return item.cart_id == self.cart_id and self.get_item(item.item_id) is not None

    def get_subtotal(self) -> Money:
        """Sum of line totals."""
        total = Money.zero()
        for item in self._items:
            total = total.add(item.get_line_total())
        return total

    def get_item_count(self) -> int:
        """Sum of quantities."""
        return sum(item.quantity for item in self._items)

    def get_line_count(self) -> int:
        """Number of distinct lines."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Whether the cart has no lines."""
        return len(self._items) == 0

    def get_items(self) -> list[CartItem]:
        """Lines in insertion order (copy)."""
        return list(self._items)

    def get_item(self, item_id: ItemId) -> CartItem | None:
        """Find a line by id."""
        for item in self._items:
            if item.item_id == item_id:
                return item
        return None

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
