"""Cart item identifier value object."""
from __future__ import annotations

import uuid
from dataclasses import dataclass

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ItemId:
    """Unique cart item identifier (UUID string)."""

    value: str

    def __post_init__(self) -> None:
        """Validate."""
        if not self.value:
            raise InvalidArgumentError("ItemId cannot be empty")

    @classmethod
    def generate(cls) -> ItemId:
        """Generate a new ItemId."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        """String form."""
        return self.value
