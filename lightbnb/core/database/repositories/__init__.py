"""
Database repository layer.

Each repository takes a ``QueryPool`` in its constructor, runs exactly one
statement per call and returns plain row dictionaries. Failures are raised as
``DataAccessError`` subclasses; "not found" is ``None`` or an empty list.

Modules:
- base: AsyncBaseRepository and the statement execution helpers
- users: User lookups and creation
- reservations: Guest reservation listing
- properties: Property search and creation
"""

from .base import AsyncBaseRepository
from .properties import PropertyRepository
from .reservations import ReservationRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository",
]
