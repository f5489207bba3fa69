"""Session identifier value object."""
from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class SessionId:
    """Identifier of the browsing session that owns a cart.

    Minted by the session layer; this package only checks it is not blank.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidArgumentError("session id is required")

    @classmethod
    def of(cls, value: str | SessionId | None) -> SessionId:
        """Build a SessionId from a raw string (or pass one through)."""
        if isinstance(value, SessionId):
            return value
        if value is None:
            raise InvalidArgumentError("session id is required")
        return cls(value)

    def __str__(self) -> str:
        """String form."""
        return self.value
