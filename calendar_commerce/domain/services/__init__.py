"""Domain service module."""
from .shipping_rate_resolver import DOMESTIC_COUNTRY_CODE, ShippingRateResolver

__all__ = [
    "DOMESTIC_COUNTRY_CODE",
    "ShippingRateResolver",
]
