"""
Reservation entity models.

A reservation links a guest (user) to a property for a date range. The
data-access layer only reads reservations.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlmodel import Field

from ..base import Base


class ReservationBase(Base):
    """Base fields for reservation entity."""

    start_date: date
    end_date: date
    property_id: int = Field(foreign_key="properties.id", index=True)
    guest_id: int = Field(foreign_key="users.id", index=True)


class Reservation(ReservationBase, table=True):
    """Entity for a guest's stay at a property.

    Table: reservations
    """

    __tablename__ = "reservations"

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Reservation(id={self.id}, property_id={self.property_id}, guest_id={self.guest_id})"
