"""Money value object."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ..exceptions import InvalidArgumentError

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """US dollar amount held as a two-place fixed-point Decimal."""

    value: Decimal

    def __post_init__(self) -> None:
        """Normalize to cents and validate."""
        raw = self.value
        if isinstance(raw, bool):
            raise InvalidArgumentError(f"Invalid money value: {raw!r}")
        try:
            # floats go through str() so 12.5 becomes Decimal("12.5"), not its binary expansion
            amount = raw if isinstance(raw, Decimal) else Decimal(str(raw))
        except (InvalidOperation, ValueError, TypeError):
            raise InvalidArgumentError(f"Invalid money value: {raw!r}") from None
        if not amount.is_finite():
            raise InvalidArgumentError(f"Invalid money value: {raw!r}")
        if amount < 0:
            raise InvalidArgumentError("Money value cannot be negative")
        object.__setattr__(self, "value", amount.quantize(CENT, rounding=ROUND_HALF_UP))

    @classmethod
    def of(cls, value: Decimal | int | str | float) -> Money:
        """Create Money from any numeric representation."""
        return cls(value)

    @classmethod
    def zero(cls) -> Money:
        """Zero dollars."""
        return cls(Decimal("0"))

    def add(self, other: Money) -> Money:
        """Return the sum as new Money."""
        return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """Return this amount multiplied by a non-negative integer."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def is_zero(self) -> bool:
        """Whether the amount is zero."""
        return self.value == 0

    def is_greater_than(self, other: Money) -> bool:
        """Whether this amount is greater than the other."""
        return self.value > other.value

    def format(self) -> str:
        """Display format, e.g. "$1,025.00"."""
        return f"${self.value:,.2f}"

    def __str__(self) -> str:
        """String form."""
        return self.format()
