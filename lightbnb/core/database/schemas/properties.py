"""
Schema models for property requests.

``PropertyCreate`` lists every column a caller may set when adding a property;
``PropertySearchFilters`` holds the optional search options. Values usually
come from HTML forms or query strings, so numeric fields accept strings and
blank strings are treated as "not supplied".
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Insert candidates, in the order they appear in a generated INSERT
PROPERTY_COLUMNS: Tuple[str, ...] = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class PropertyCreate(BaseModel):
    """Schema for creating a property. Every field is optional."""

    owner_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: Optional[int] = Field(default=None, description="Nightly price in cents")
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None
    parking_spaces: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms: Optional[int] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator(
        "owner_id", "cost_per_night", "parking_spaces", "number_of_bathrooms", "number_of_bedrooms", mode="before"
    )
    @classmethod
    def _numeric_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    def present_columns(self) -> list[tuple[str, Any]]:
        """Truthy fields in ``PROPERTY_COLUMNS`` order.

        Falsy values (``0``, ``""``, ``None``) are left out, so a zero is
        indistinguishable from an absent field.
        """
        return [(column, getattr(self, column)) for column in PROPERTY_COLUMNS if getattr(self, column)]


class PropertySearchFilters(BaseModel):
    """Optional criteria for a property search."""

    city: Optional[str] = Field(default=None, description="Substring of the city name")
    user_id: Optional[int] = Field(default=None, description="Only properties owned by this user")
    minimum_price_per_night: Optional[float] = Field(default=None, description="Dollars")
    maximum_price_per_night: Optional[float] = Field(default=None, description="Dollars")
    minimum_rating: Optional[float] = Field(default=None, description="Lowest acceptable average rating")

    model_config = ConfigDict(extra="ignore")

    @field_validator(
        "user_id", "minimum_price_per_night", "maximum_price_per_night", "minimum_rating", mode="before"
    )
    @classmethod
    def _numeric_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)
