"""Cart aggregate tests."""
from decimal import Decimal

import pytest

from calendar_commerce.domain.entities import Cart
from calendar_commerce.domain.enums import ItemMutationOutcome
from calendar_commerce.domain.identifiers import ItemId, SessionId
from calendar_commerce.domain.value_objects import Money


def _cart() -> Cart:
    return Cart.create(SessionId("sess-1"))


class TestCart:
    """Cart unit tests."""

    def test_create_returns_empty_cart(self) -> None:
        cart = _cart()
        assert cart.is_empty() is True
        assert cart.get_item_count() == 0
        assert cart.get_subtotal() == Money.zero()
        assert cart.session_id == SessionId("sess-1")
        assert cart.version == 0

    def test_add_item_appends_line(self) -> None:
        cart = _cart()
        item = cart.add_item("print", "Calendar 2026", Money.of("25.00"), quantity=2, year=2026)
        assert cart.get_line_count() == 1
        assert item.cart_id == cart.cart_id
        assert cart.get_item_count() == 2
        assert cart.get_subtotal().value == Decimal("50.00")

    def test_add_item_keeps_insertion_order(self) -> None:
        cart = _cart()
        first = cart.add_item("print", "A", Money.of("25"), year=2026)
        second = cart.add_item("pdf", "B", Money.of("5"), year=2026)
        assert [i.item_id for i in cart.get_items()] == [first.item_id, second.item_id]

    def test_add_matching_item_merges_quantity_and_keeps_price(self) -> None:
        cart = _cart()
        first = cart.add_item("print", "Calendar 2026", Money.of("25.00"), 1, 2026, "tpl-1", "{}")
        merged = cart.add_item("print", "Calendar 2026", Money.of("30.00"), 2, 2026, "tpl-1", "{}")
        assert merged is first
        assert cart.get_line_count() == 1
        assert merged.quantity == 3
        assert merged.unit_price == Money.of("25.00")

    def test_add_with_different_configuration_creates_new_line(self) -> None:
        cart = _cart()
        cart.add_item("print", "Calendar 2026", Money.of("25"), 1, 2026, "tpl-1", '{"a":1}')
        cart.add_item("print", "Calendar 2026", Money.of("25"), 1, 2026, "tpl-1", '{"a":2}')
        assert cart.get_line_count() == 2

    def test_generated_items_always_create_new_lines(self) -> None:
        cart = _cart()
        cart.add_item("print", "Maze", Money.of("25"), generator_type="maze")
        cart.add_item("print", "Maze", Money.of("25"), generator_type="maze")
        assert cart.get_line_count() == 2
        assert cart.get_item_count() == 2

    def test_add_item_with_quantity_below_one_is_rejected(self) -> None:
        cart = _cart()
        with pytest.raises(ValueError):
            cart.add_item("print", "Calendar", Money.of("25"), quantity=0)
        assert cart.is_empty() is True

    def test_update_item_quantity(self) -> None:
        cart = _cart()
        item = cart.add_item("print", "Calendar", Money.of("25.00"))
        outcome = cart.update_item_quantity(item.item_id, 3)
        assert outcome is ItemMutationOutcome.UPDATED
        assert cart.get_item(item.item_id).get_line_total().value == Decimal("75.00")

    @pytest.mark.parametrize("quantity", [0, -5])
    def test_update_to_non_positive_quantity_removes_line(self, quantity: int) -> None:
        cart = _cart()
        item = cart.add_item("print", "Calendar", Money.of("25.00"))
        outcome = cart.update_item_quantity(item.item_id, quantity)
        assert outcome is ItemMutationOutcome.REMOVED
        assert cart.is_empty() is True

    def test_update_unknown_item_is_not_in_cart(self) -> None:
        cart = _cart()
        cart.add_item("print", "Calendar", Money.of("25.00"))
        outcome = cart.update_item_quantity(ItemId("missing"), 3)
        assert outcome is ItemMutationOutcome.NOT_IN_CART
        assert outcome.is_applied() is False
        assert cart.get_item_count() == 1

    def test_remove_item_is_idempotent(self) -> None:
        cart = _cart()
        item = cart.add_item("print", "Calendar", Money.of("25.00"))
        assert cart.remove_item(item.item_id) is ItemMutationOutcome.REMOVED
        assert cart.remove_item(item.item_id) is ItemMutationOutcome.NOT_IN_CART
        assert cart.is_empty() is True

    def test_clear_removes_everything(self) -> None:
        cart = _cart()
        cart.add_item("print", "A", Money.of("25"), year=2026)
        cart.add_item("pdf", "B", Money.of("5"), year=2026)
        cart.clear()
        assert cart.is_empty() is True
        cart.clear()
        assert cart.is_empty() is True

    def test_owns_only_its_items(self) -> None:
        cart = _cart()
        other = Cart.create(SessionId("sess-2"))
        mine = cart.add_item("print", "A", Money.of("25"))
        theirs = other.add_item("print", "A", Money.of("25"))
        assert cart.owns(mine) is True
        assert cart.owns(theirs) is False

    def test_get_items_returns_a_copy(self) -> None:
        cart = _cart()
        cart.add_item("print", "A", Money.of("25"))
        cart.get_items().clear()
        assert cart.get_line_count() == 1

    def test_updated_at_moves_forward_on_mutation(self) -> None:
        cart = _cart()
        initial = cart.updated_at
        cart.add_item("print", "A", Money.of("25"))
        assert cart.updated_at >= initial
