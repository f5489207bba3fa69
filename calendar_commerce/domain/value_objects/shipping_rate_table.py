"""Shipping rate table value object."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from ..enums import ShippingTier
from .money import Money

DEFAULT_RATES: Mapping[ShippingTier, Decimal] = MappingProxyType({
    ShippingTier.STANDARD: Decimal("5.99"),
    ShippingTier.PRIORITY: Decimal("9.99"),
    ShippingTier.EXPRESS: Decimal("14.99"),
    ShippingTier.INTERNATIONAL: Decimal("19.99"),
})


@dataclass(frozen=True)
class ShippingRateTable:
    """Flat shipping rate per tier."""

    rates: Mapping[ShippingTier, Money]

    def __post_init__(self) -> None:
        """Validate that every tier has a rate."""
        missing = [tier.value for tier in ShippingTier if tier not in self.rates]
        if missing:
            raise ValueError(f"Missing shipping rates for tiers: {', '.join(missing)}")
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    @classmethod
    def default(cls) -> ShippingRateTable:
        """Rate table with the built-in default rates."""
        return cls({tier: Money(amount) for tier, amount in DEFAULT_RATES.items()})

    def rate_for(self, tier: ShippingTier) -> Money:
        """Return the rate configured for a tier."""
        return self.rates[tier]
