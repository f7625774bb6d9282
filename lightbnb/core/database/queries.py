"""
Statement builders for the LightBnB tables.

Every function here is pure: it takes plain input and returns a
``CompiledQuery`` without touching a pool. Repositories run the result.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import InvalidQueryError
from .schemas.properties import PropertyCreate, PropertySearchFilters
from .schemas.users import UserCreate
from .sql import CompiledQuery, Fragment, param, where_clause

DEFAULT_LIMIT = 10

FilterInput = Union[PropertySearchFilters, Mapping[str, Any], None]

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def coerce_input(schema: Type[SchemaType], data: Any) -> SchemaType:
    """Validate caller input into ``schema``, accepting instances, mappings and models.

    Raises:
        InvalidQueryError: If the input does not fit the schema
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(dict(data or {}))
    except (TypeError, ValueError, ValidationError) as exc:
        raise InvalidQueryError(f"Invalid {schema.__name__}: {exc}") from exc


def _resolve_limit(limit: Optional[int]) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    try:
        limit = int(limit)
    except (TypeError, ValueError) as exc:
        raise InvalidQueryError(f"Limit must be an integer, got {limit!r}") from exc
    if limit < 1:
        raise InvalidQueryError(f"Limit must be a positive integer, got {limit}")
    return limit


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


def user_by_email_query(email: str) -> CompiledQuery:
    return (Fragment("SELECT * FROM users WHERE email = ") + param(email)).compile()


def user_by_id_query(user_id: Any) -> CompiledQuery:
    return (Fragment("SELECT * FROM users WHERE id = ") + param(user_id)).compile()


def insert_user_query(user: UserCreate) -> CompiledQuery:
    values = Fragment.join(", ", [param(user.name), param(user.email), param(user.password)])
    return (
        Fragment("INSERT INTO users (name, email, password) VALUES (") + values + ") RETURNING *"
    ).compile()


# ---------------------------------------------------------------------------
# Reservations
# ---------------------------------------------------------------------------


def guest_reservations_query(guest_id: Any, limit: Optional[int] = DEFAULT_LIMIT) -> CompiledQuery:
    """Reservations of one guest with the reserved property's columns."""
    stmt = (
        Fragment(
            "SELECT reservations.id AS reservation_id, reservations.start_date, reservations.end_date, properties.* "
            "FROM reservations "
            "JOIN properties ON reservations.property_id = properties.id "
            "JOIN users ON reservations.guest_id = users.id "
            "WHERE users.id = "
        )
        + param(guest_id)
        + " ORDER BY reservations.start_date LIMIT "
        + param(_resolve_limit(limit))
    )
    return stmt.compile()


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

_PROPERTY_SEARCH_BASE = (
    "SELECT properties.*, AVG(property_reviews.rating) AS average_rating "
    "FROM properties "
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)


def build_property_search_query(filters: FilterInput = None, limit: Optional[int] = DEFAULT_LIMIT) -> CompiledQuery:
    """Build the property search statement.

    Conditions are added for truthy filters only, in the order city, owner,
    minimum price, maximum price. ``minimum_rating`` applies to the averaged
    rating and therefore lands in a ``HAVING`` clause after ``GROUP BY``. The
    limit is always the last bound value.

    Args:
        filters: ``PropertySearchFilters`` or a mapping with the same keys;
            unknown keys are ignored
        limit: Maximum number of rows, defaults to 10

    Returns:
        CompiledQuery with ``$n`` placeholders matching ``params`` order
    """
    filters = coerce_input(PropertySearchFilters, filters)

    conditions: List[Fragment] = []
    if filters.city:
        conditions.append(Fragment("properties.city LIKE ") + param(f"%{filters.city}%"))
    if filters.user_id:
        conditions.append(Fragment("properties.owner_id = ") + param(filters.user_id))
    if filters.minimum_price_per_night:
        conditions.append(Fragment("(properties.cost_per_night / 100.0) >= ") + param(filters.minimum_price_per_night))
    if filters.maximum_price_per_night:
        conditions.append(Fragment("(properties.cost_per_night / 100.0) <= ") + param(filters.maximum_price_per_night))

    having: List[Fragment] = []
    if filters.minimum_rating:
        having.append(Fragment("AVG(property_reviews.rating) >= ") + param(filters.minimum_rating))

    stmt = Fragment.join(
        " ",
        [
            Fragment(_PROPERTY_SEARCH_BASE),
            where_clause(conditions),
            Fragment("GROUP BY properties.id"),
            where_clause(having, keyword="HAVING"),
            Fragment("ORDER BY properties.cost_per_night LIMIT ") + param(_resolve_limit(limit)),
        ],
    )
    return stmt.compile()


def insert_property_query(prop: PropertyCreate) -> CompiledQuery:
    """Build an INSERT naming only the columns present on ``prop``.

    Raises:
        InvalidQueryError: If no column has a usable value
    """
    present = prop.present_columns()
    if not present:
        raise InvalidQueryError("Cannot add a property without any fields")

    columns = ", ".join(column for column, _ in present)
    values = Fragment.join(", ", [param(value) for _, value in present])
    return (Fragment(f"INSERT INTO properties ({columns}) VALUES (") + values + ") RETURNING *").compile()
