"""Logging for item mutations that were ignored."""
import logging

from calendar_commerce.domain.entities import Cart
from calendar_commerce.domain.identifiers import ItemId

logger = logging.getLogger(__name__)


def log_item_not_in_cart(cart: Cart, item_id: ItemId) -> None:
    """Record that an item mutation was a no-op.

    A missing item and one owned by another cart are not told apart; no
    repository lookup happens on this path.
    """
    logger.warning(
        "Item %s is missing or belongs to another cart; cart %s left unchanged",
        item_id, cart.cart_id,
    )
