"""Shipping tier enum."""
from enum import Enum


class ShippingTier(Enum):
    """Delivery speed / destination class used to key the rate table."""

    STANDARD = "standard"
    PRIORITY = "priority"
    EXPRESS = "express"
    INTERNATIONAL = "international"

    def get_display_name(self) -> str:
        """Return the customer-facing name."""
        names = {
            ShippingTier.STANDARD: "Standard Shipping",
            ShippingTier.PRIORITY: "Priority Shipping",
            ShippingTier.EXPRESS: "Express Shipping",
            ShippingTier.INTERNATIONAL: "International Shipping",
        }
        return names[self]

    def get_delivery_estimate(self) -> str:
        """Return the delivery estimate shown next to the option."""
        estimates = {
            ShippingTier.STANDARD: "5-7 business days",
            ShippingTier.PRIORITY: "2-3 business days",
            ShippingTier.EXPRESS: "1-2 business days",
            ShippingTier.INTERNATIONAL: "10-20 business days",
        }
        return estimates[self]

    @classmethod
    def domestic_tiers(cls) -> tuple["ShippingTier", ...]:
        """Tiers offered for domestic destinations, cheapest first."""
        return (cls.STANDARD, cls.PRIORITY, cls.EXPRESS)
