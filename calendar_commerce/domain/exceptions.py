"""Domain errors shared across the cart, catalog and shipping components."""


class InvalidArgumentError(ValueError):
    """Malformed or missing caller input."""


class PolicyRejectedError(Exception):
    """Well-formed input refused by a business rule.

    Kept outside the ValueError hierarchy so that callers catching validation
    errors never handle a policy rejection by accident.
    """

    def __init__(self, message: str, country: str | None = None) -> None:
        self.country = country
        super().__init__(message)


class ConcurrentCartModificationError(Exception):
    """A concurrent writer saved the cart first."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Cart for session {session_id} was modified concurrently")
