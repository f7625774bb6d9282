"""
Schema models for data-access input.

Modules:
- users: ``UserCreate``
- properties: ``PropertyCreate``, ``PropertySearchFilters`` and the insert column order
"""

from .properties import PROPERTY_COLUMNS, PropertyCreate, PropertySearchFilters
from .users import UserCreate

__all__ = [
    "PROPERTY_COLUMNS",
    "PropertyCreate",
    "PropertySearchFilters",
    "UserCreate",
]
