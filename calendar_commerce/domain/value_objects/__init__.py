"""Value object module."""
from .money import Money
from .product import Product
from .shipping_quote import ShippingOption, ShippingQuote
from .shipping_rate_table import DEFAULT_RATES, ShippingRateTable

__all__ = [
    "DEFAULT_RATES",
    "Money",
    "Product",
    "ShippingOption",
    "ShippingQuote",
    "ShippingRateTable",
]
