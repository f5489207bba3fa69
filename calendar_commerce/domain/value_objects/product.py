"""Catalog product value object."""
from __future__ import annotations

from dataclasses import dataclass, field

from .money import Money


@dataclass(frozen=True)
class Product:
    """A purchasable product definition. Immutable for the life of the process."""

    code: str
    name: str
    description: str
    price: Money
    features: tuple[str, ...] = field(default_factory=tuple)
    icon: str | None = None
    badge: str | None = None
    display_order: int = 0

    def __post_init__(self) -> None:
        """Validate."""
        if not self.code:
            raise ValueError("Product code cannot be empty")
        if not self.name:
            raise ValueError("Product name cannot be empty")
        # lists passed by callers are frozen so the product stays hashable
        object.__setattr__(self, "features", tuple(self.features))

    def sort_key(self) -> tuple[int, str]:
        """Listing order: display order, then code."""
        return (self.display_order, self.code)

    def to_dict(self) -> dict:
        """Render the catalog entry for external callers."""
        return {
            "code": self.code,
            "name": self.name,
            "description": self.description,
            "price": self.price.value,
            "features": list(self.features),
            "icon": self.icon,
            "badge": self.badge,
            "displayOrder": self.display_order,
        }
