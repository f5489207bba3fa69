"""RemoveFromCartUseCase tests."""
from decimal import Decimal

import pytest

from calendar_commerce.application.use_cases import (
    AddToCartUseCase,
    GetCartUseCase,
    RemoveFromCartUseCase,
)


@pytest.fixture
def add(repository, catalog) -> AddToCartUseCase:
    return AddToCartUseCase(repository, catalog)


@pytest.fixture
def use_case(repository) -> RemoveFromCartUseCase:
    return RemoveFromCartUseCase(repository)


class TestRemoveFromCartUseCase:
    """RemoveFromCartUseCase unit tests."""

    def test_removes_item(self, add, use_case) -> None:
        add.execute("sess-1", product_code="print", year=2026)
        view = add.execute("sess-1", product_code="pdf", year=2026)
        print_id = view.items[0].id

        view = use_case.execute("sess-1", print_id)

        assert [i.product_code for i in view.items] == ["pdf"]
        assert view.subtotal.value == Decimal("5.00")

    def test_is_idempotent(self, add, use_case) -> None:
        item_id = add.execute("sess-1", year=2026).items[0].id
        first = use_case.execute("sess-1", item_id)
        second = use_case.execute("sess-1", item_id)
        assert first.to_dict() == second.to_dict()
        assert second.items == []

    def test_item_from_other_session_is_left_alone(self, add, use_case, repository) -> None:
        mine = add.execute("sess-1", year=2026)
        theirs = add.execute("sess-2", year=2027)

        view = use_case.execute("sess-1", theirs.items[0].id)

        assert view.to_dict() == mine.to_dict()
        assert GetCartUseCase(repository).execute("sess-2").to_dict() == theirs.to_dict()
