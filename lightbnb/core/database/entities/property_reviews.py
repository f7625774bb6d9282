"""
Property review entity models.

Reviews are only consumed in aggregate: property searches average ``rating``
per property.
"""

from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, Text

from ..base import Base


class PropertyReviewBase(Base):
    """Base fields for property review entity."""

    guest_id: int = Field(foreign_key="users.id", index=True)
    property_id: int = Field(foreign_key="properties.id", index=True)
    reservation_id: int = Field(foreign_key="reservations.id", index=True)
    rating: int = Field(default=0, ge=0, le=5, sa_type=sa.SmallInteger, sa_column_kwargs={"server_default": "0"})
    message: Optional[str] = Field(default=None, sa_type=Text)


class PropertyReview(PropertyReviewBase, table=True):
    """Entity for a guest's review of a stay.

    Table: property_reviews
    """

    __tablename__ = "property_reviews"

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})"
