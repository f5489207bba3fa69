"""CartItem tests."""
from decimal import Decimal

import pytest

from calendar_commerce.domain.entities import CartItem
from calendar_commerce.domain.identifiers import CartId
from calendar_commerce.domain.value_objects import Money


def _item(**overrides) -> CartItem:
    values = {
        "cart_id": CartId("cart-1"),
        "product_code": "print",
        "display_name": "Calendar 2026",
        "quantity": 2,
        "unit_price": Money.of("25.00"),
        "year": 2026,
        "template_id": "tpl-1",
        "configuration": '{"theme":"default"}',
    }
    values.update(overrides)
    return CartItem.create(**values)


class TestCartItem:
    """CartItem unit tests."""

    def test_line_total_is_price_times_quantity(self) -> None:
        assert _item().get_line_total().value == Decimal("50.00")

    def test_quantity_below_one_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            _item(quantity=0)

    def test_change_quantity(self) -> None:
        item = _item()
        item.change_quantity(5)
        assert item.quantity == 5
        assert item.get_line_total().value == Decimal("125.00")

    def test_change_quantity_below_one_is_rejected(self) -> None:
        item = _item()
        with pytest.raises(ValueError):
            item.change_quantity(0)
        assert item.quantity == 2

    def test_product_ref_prefers_template(self) -> None:
        assert _item().get_product_ref() == "tpl-1"
        assert _item(template_id=None).get_product_ref() == "print"

    def test_matches_same_template_code_year_and_configuration(self) -> None:
        item = _item()
        assert item.matches("tpl-1", "print", 2026, '{"theme":"default"}') is True

    @pytest.mark.parametrize(
        "template_id, product_code, year, configuration",
        [
            ("tpl-2", "print", 2026, '{"theme":"default"}'),
            ("tpl-1", "pdf", 2026, '{"theme":"default"}'),
            ("tpl-1", "print", 2027, '{"theme":"default"}'),
            ("tpl-1", "print", 2026, '{"theme":"dark"}'),
            ("tpl-1", "print", 2026, None),
        ],
    )
    def test_differing_attribute_does_not_match(
        self, template_id, product_code, year, configuration
    ) -> None:
        assert _item().matches(template_id, product_code, year, configuration) is False

    def test_two_missing_configurations_match(self) -> None:
        item = _item(configuration=None)
        assert item.matches("tpl-1", "print", 2026, None) is True

    def test_generated_item_never_matches(self) -> None:
        item = _item(generator_type="maze")
        assert item.matches("tpl-1", "print", 2026, '{"theme":"default"}') is False
