"""Shipping quote and option value objects."""
from dataclasses import dataclass

from ..enums import ShippingTier
from .money import Money


@dataclass(frozen=True)
class ShippingQuote:
    """Shipping charge computed for one destination. Never persisted."""

    country: str
    tier: ShippingTier
    amount: Money


@dataclass(frozen=True)
class ShippingOption:
    """A selectable delivery speed for a destination."""

    tier: ShippingTier
    amount: Money

    @property
    def name(self) -> str:
        return self.tier.get_display_name()

    @property
    def description(self) -> str:
        return self.tier.get_delivery_estimate()

    def to_dict(self) -> dict:
        return {
            "id": self.tier.value,
            "name": self.name,
            "description": self.description,
            "price": self.amount.value,
        }
