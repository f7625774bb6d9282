"""
Reservation repository.

Read-only access to reservations, joined with the reserved property.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..entities.reservations import Reservation
from ..pool import QueryPool, Row
from ..queries import DEFAULT_LIMIT, guest_reservations_query
from .base import AsyncBaseRepository


class ReservationRepository(AsyncBaseRepository[Reservation]):
    """Repository for reservation data access operations."""

    def __init__(self, pool: QueryPool) -> None:
        super().__init__(pool, Reservation)

    async def list_by_guest(self, guest_id: Any, limit: Optional[int] = DEFAULT_LIMIT) -> List[Row]:
        """List a guest's reservations ordered by start date.

        Each row holds the property's columns plus ``reservation_id``,
        ``start_date`` and ``end_date``.

        Args:
            guest_id: Id of the guest
            limit: Maximum rows to return, defaults to 10

        Returns:
            List of rows, empty when the guest has no reservations
        """
        return await self._fetch_all(guest_reservations_query(guest_id, limit))
