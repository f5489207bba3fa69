"""Product catalog interface."""
from abc import ABC, abstractmethod

from ..value_objects import Money, Product


class CatalogProvider(ABC):
    """Read-only registry of purchasable products.

    Implementations are immutable after construction and safe to share across
    threads.
    """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """All products ordered by display order, ties broken by code."""
        pass

    @abstractmethod
    def get(self, code: str) -> Product | None:
        """Product for a code, or None."""
        pass

    @abstractmethod
    def price(self, code: str) -> Money:
        """Price of a product.

        Raises:
            InvalidArgumentError: the code is not registered
        """
        pass

    @abstractmethod
    def is_valid(self, code: str | None) -> bool:
        """Whether the code is registered."""
        pass

    @abstractmethod
    def default_code(self) -> str:
        """Code of the product used when a caller names none."""
        pass
