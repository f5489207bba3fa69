"""Static product catalog."""
from typing import Iterable

from calendar_commerce.domain.exceptions import InvalidArgumentError
from calendar_commerce.domain.ports import CatalogProvider
from calendar_commerce.domain.value_objects import Money, Product

DEFAULT_PRODUCT_CODE = "print"

DEFAULT_PRODUCTS: tuple[Product, ...] = (
    Product(
        code="print",
        name='Printed 35" x 23" Poster',
        description="Beautiful printed calendar shipped directly to your door.",
        price=Money.of("25.00"),
        features=(
            "Premium quality paper stock",
            "Vibrant, long-lasting colors",
            "PDF download included free",
            "Ships within 3-5 business days",
        ),
        icon="pi-print",
        badge="Most Popular",
        display_order=1,
    ),
    Product(
        code="pdf",
        name="Digital PDF Download",
        description=(
            "High-resolution PDF file ready for printing at home or any print shop."
        ),
        price=Money.of("5.00"),
        features=(
            "Instant download after purchase",
            "Unlimited personal prints",
        ),
        icon="pi-file-pdf",
        badge=None,
        display_order=2,
    ),
)


class StaticProductCatalog(CatalogProvider):
    """Catalog built once from a fixed product list."""

    def __init__(
        self,
        products: Iterable[Product] | None = None,
        default_code: str = DEFAULT_PRODUCT_CODE,
    ) -> None:
        """Initialize.

        Args:
            products: Catalog entries (built-in products when omitted)
            default_code: Product used when a caller names none

        Raises:
            ValueError: duplicate codes, or default_code not in products
        """
        entries = DEFAULT_PRODUCTS if products is None else tuple(products)
        by_code: dict[str, Product] = {}
        for product in entries:
            if product.code in by_code:
                raise ValueError(f"Duplicate product code: {product.code}")
            by_code[product.code] = product
        if default_code not in by_code:
            raise ValueError(f"Default product code is not in the catalog: {default_code}")

        self._products = by_code
        self._ordered = tuple(sorted(by_code.values(), key=Product.sort_key))
        self._default_code = default_code

    def list_all(self) -> list[Product]:
        """All products ordered by display order, ties broken by code."""
        return list(self._ordered)

    def get(self, code: str) -> Product | None:
        """Product for a code, or None."""
        return self._products.get(code)

    def price(self, code: str) -> Money:
        """Price of a product."""
        product = self._products.get(code)
        if product is None:
            raise InvalidArgumentError(f"unknown product code: {code}")
        return product.price

    def is_valid(self, code: str | None) -> bool:
        """Whether the code is registered."""
        return code is not None and code in self._products

    def default_code(self) -> str:
        """Code of the default product."""
        return self._default_code
