"""Enum module."""
from .item_mutation_outcome import ItemMutationOutcome
from .shipping_tier import ShippingTier

__all__ = [
    "ItemMutationOutcome",
    "ShippingTier",
]
