"""Settings read from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from calendar_commerce.domain.enums import ShippingTier
from calendar_commerce.domain.value_objects import DEFAULT_RATES, Money, ShippingRateTable

RATE_ENV_VARS: dict[ShippingTier, str] = {
    ShippingTier.STANDARD: "CALENDAR_SHIPPING_DOMESTIC_STANDARD",
    ShippingTier.PRIORITY: "CALENDAR_SHIPPING_DOMESTIC_PRIORITY",
    ShippingTier.EXPRESS: "CALENDAR_SHIPPING_DOMESTIC_EXPRESS",
    ShippingTier.INTERNATIONAL: "CALENDAR_SHIPPING_INTERNATIONAL",
}


@dataclass(frozen=True)
class CommerceSettings:
    """Process-wide settings, read once at startup.

    CALENDAR_SHIPPING_*: shipping rate per tier (defaults 5.99 / 9.99 / 14.99 / 19.99)
    CART_TABLE_NAME: DynamoDB cart table; unset means the in-memory repository
    """

    shipping_rates: ShippingRateTable
    cart_table_name: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CommerceSettings:
        """Build settings from the environment.

        Args:
            environ: Variables to read (os.environ when omitted)

        Raises:
            ValueError: a rate variable is not a non-negative decimal
        """
        env = os.environ if environ is None else environ

        rates: dict[ShippingTier, Money] = {}
        for tier, name in RATE_ENV_VARS.items():
            raw = env.get(name)
            if raw is None or not raw.strip():
                rates[tier] = Money(DEFAULT_RATES[tier])
                continue
            try:
                rates[tier] = Money.of(raw.strip())
            except ValueError as e:
                raise ValueError(f"Invalid {name}: {raw!r}") from e

        return cls(
            shipping_rates=ShippingRateTable(rates),
            cart_table_name=env.get("CART_TABLE_NAME") or None,
        )

    @property
    def use_dynamodb(self) -> bool:
        """Whether carts are stored in DynamoDB."""
        return self.cart_table_name is not None
