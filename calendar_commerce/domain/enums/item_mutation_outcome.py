"""Outcome of a guarded cart item mutation."""
from enum import Enum


class ItemMutationOutcome(Enum):
    """What a quantity update or removal actually did.

    NOT_IN_CART covers three cases callers cannot tell apart: the item never
    existed, it was already removed, or it belongs to another session's cart.
    """

    UPDATED = "updated"
    REMOVED = "removed"
    NOT_IN_CART = "not_in_cart"

    def is_applied(self) -> bool:
        """Whether the cart changed."""
        return self is not ItemMutationOutcome.NOT_IN_CART
