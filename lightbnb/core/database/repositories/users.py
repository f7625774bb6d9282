"""
User repository.

This module provides data access operations for application users: lookups
by email or id and account creation.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from ..entities.users import User
from ..errors import QueryExecutionError
from ..pool import QueryPool, Row
from ..queries import coerce_input, insert_user_query, user_by_email_query, user_by_id_query
from ..schemas.users import UserCreate
from .base import AsyncBaseRepository


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations."""

    def __init__(self, pool: QueryPool) -> None:
        super().__init__(pool, User)

    async def get_by_email(self, email: str) -> Optional[Row]:
        """Get a user by email.

        Args:
            email: Email address to match exactly

        Returns:
            User row or None
        """
        return await self._fetch_one(user_by_email_query(email))

    async def get_by_id(self, user_id: Any) -> Optional[Row]:
        """Get a user by primary key.

        Args:
            user_id: User id

        Returns:
            User row or None
        """
        return await self._fetch_one(user_by_id_query(user_id))

    async def create(self, user: Union[UserCreate, Mapping[str, Any]]) -> Row:
        """Insert a user and return the stored row.

        Args:
            user: ``UserCreate`` or a mapping with name, email and password

        Returns:
            The inserted row, including its generated id

        Raises:
            InvalidQueryError: If required fields are missing
            QueryExecutionError: If the insert fails or returns nothing
        """
        query = insert_user_query(coerce_input(UserCreate, user))
        row = await self._fetch_one(query)
        if row is None:
            raise QueryExecutionError("Insert into users returned no row", sql=query.text, params=query.params)
        return row
