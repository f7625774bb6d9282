"""
Schema models for user requests.

These schemas validate caller input before it reaches the repositories and are
separate from the entity models to allow independent evolution.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: str = Field(description="Display name")
    email: str = Field(description="Login email")
    password: str = Field(description="Password, stored as given")

    model_config = ConfigDict(extra="ignore")
