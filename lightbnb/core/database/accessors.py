"""
Classic LightBnB accessor functions.

These functions keep the contract the web routes were written against: they
never raise for database failures. A failure is logged at ERROR level and the
function returns ``None``. Not-found lookups also return ``None`` while
list operations return an empty list, so ``None`` from a list accessor always
means the statement did not complete.

New code should prefer the repositories, which raise ``DataAccessError``.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from .errors import DataAccessError
from .pool import QueryPool, Row
from .queries import DEFAULT_LIMIT, FilterInput
from .repositories.properties import PropertyRepository
from .repositories.reservations import ReservationRepository
from .repositories.users import UserRepository
from .schemas.properties import PropertyCreate
from .schemas.users import UserCreate

logger = logging.getLogger(__name__)


def _log_failure(operation: str, error: DataAccessError) -> None:
    logger.error(f"{operation} failed: {error}")


async def get_user_with_email(pool: QueryPool, email: str) -> Optional[Row]:
    """Get a single user given their email; ``None`` if absent or on failure."""
    try:
        return await UserRepository(pool).get_by_email(email)
    except DataAccessError as e:
        _log_failure("get_user_with_email", e)
        return None


async def get_user_with_id(pool: QueryPool, user_id: Any) -> Optional[Row]:
    """Get a single user given their id; ``None`` if absent or on failure."""
    try:
        return await UserRepository(pool).get_by_id(user_id)
    except DataAccessError as e:
        _log_failure("get_user_with_id", e)
        return None


async def add_user(pool: QueryPool, user: Union[UserCreate, Mapping[str, Any]]) -> Optional[Row]:
    """Add a new user; returns the stored row, or ``None`` on failure."""
    try:
        return await UserRepository(pool).create(user)
    except DataAccessError as e:
        _log_failure("add_user", e)
        return None


async def get_all_reservations(
    pool: QueryPool, guest_id: Any, limit: Optional[int] = DEFAULT_LIMIT
) -> Optional[List[Row]]:
    """Get a guest's reservations; ``None`` on failure."""
    try:
        return await ReservationRepository(pool).list_by_guest(guest_id, limit)
    except DataAccessError as e:
        _log_failure("get_all_reservations", e)
        return None


async def get_all_properties(
    pool: QueryPool, options: FilterInput = None, limit: Optional[int] = DEFAULT_LIMIT
) -> Optional[List[Row]]:
    """Search properties; ``None`` on failure."""
    try:
        return await PropertyRepository(pool).search(options, limit)
    except DataAccessError as e:
        _log_failure("get_all_properties", e)
        return None


async def add_property(pool: QueryPool, prop: Union[PropertyCreate, Mapping[str, Any]]) -> Optional[Row]:
    """Add a property; returns the stored row, or ``None`` on failure."""
    try:
        return await PropertyRepository(pool).create(prop)
    except DataAccessError as e:
        _log_failure("add_property", e)
        return None
