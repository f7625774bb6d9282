"""
Database entity models.

This package contains the SQLModel entities for the LightBnB tables. They
define the schema used by ``create_all`` (tests and local development) and
mirror the Alembic migration used in production.

Modules:
- users: Application users (owners and guests)
- properties: Rentable properties
- reservations: Guest stays at a property
- property_reviews: Ratings left after a stay
"""

from . import (
    properties,
    property_reviews,
    reservations,
    users,
)
from .properties import Property
from .property_reviews import PropertyReview
from .reservations import Reservation
from .users import User

__all__ = [
    "Property",
    "PropertyReview",
    "Reservation",
    "User",
    "properties",
    "property_reviews",
    "reservations",
    "users",
]
