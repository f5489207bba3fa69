"""Cart, catalog and shipping pricing core for the calendar store."""
from . import domain

__all__ = ["domain"]
