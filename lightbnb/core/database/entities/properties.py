"""
Property entity models.

This module contains the database entity for rentable properties. Prices are
stored in cents (``cost_per_night``); searches that take dollar amounts divide
by 100 before comparing.
"""

from __future__ import annotations

from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, Text

from ..base import Base


class PropertyBase(Base):
    """Base fields for property entity."""

    owner_id: int = Field(foreign_key="users.id", index=True, description="Owning user")
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_type=Text)

    # Media
    thumbnail_photo_url: Optional[str] = Field(default=None, max_length=255)
    cover_photo_url: Optional[str] = Field(default=None, max_length=255)

    # Pricing and capacity
    cost_per_night: int = Field(default=0, description="Nightly price in cents", sa_column_kwargs={"server_default": "0"})
    parking_spaces: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
    number_of_bathrooms: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
    number_of_bedrooms: int = Field(default=0, sa_column_kwargs={"server_default": "0"})

    # Address
    country: Optional[str] = Field(default=None, max_length=255)
    street: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=255, index=True)
    province: Optional[str] = Field(default=None, max_length=255)
    post_code: Optional[str] = Field(default=None, max_length=255)

    active: bool = Field(default=True, sa_column_kwargs={"server_default": sa.true()})


class Property(PropertyBase, table=True):
    """Entity for a rentable property.

    Table: properties
    """

    __tablename__ = "properties"

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Property(id={self.id}, title={self.title}, city={self.city})"
