"""Use case module."""
from .add_to_cart import AddToCartUseCase
from .cart_view import TAX_PLACEHOLDER, CartItemView, CartView
from .clear_cart import ClearCartUseCase
from .get_cart import GetCartUseCase
from .quote_checkout import CheckoutQuote, QuoteCheckoutUseCase
from .remove_from_cart import RemoveFromCartUseCase
from .update_cart_item_quantity import UpdateCartItemQuantityUseCase

__all__ = [
    # Projection
    "CartView",
    "CartItemView",
    "TAX_PLACEHOLDER",
    # Cart Use Cases
    "GetCartUseCase",
    "AddToCartUseCase",
    "UpdateCartItemQuantityUseCase",
    "RemoveFromCartUseCase",
    "ClearCartUseCase",
    # Checkout Use Cases
    "QuoteCheckoutUseCase",
    "CheckoutQuote",
]
