"""
User entity models.

This module contains the database entity for application users. Users own
properties, make reservations and write reviews. Passwords are stored as
supplied; hashing happens before this layer.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class UserBase(Base):
    """Base fields for user entity."""

    name: str = Field(max_length=255, description="Display name")
    email: str = Field(max_length=255, index=True, description="Login email, unique by convention")
    password: str = Field(max_length=255, description="Password as supplied by the caller")


class User(UserBase, table=True):
    """Entity for an application user.

    Table: users
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
