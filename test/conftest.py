from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence
from unittest.mock import AsyncMock

import pytest

from lightbnb.core.database.pool import QueryResult


def _result(rows: Optional[List[Dict[str, Any]]] = None) -> QueryResult:
    rows = rows or []
    return QueryResult(rows=rows, row_count=len(rows))


@pytest.fixture
def make_result():
    """Build a QueryResult the way a real pool would report it."""
    return _result


@pytest.fixture
def mock_pool() -> AsyncMock:
    """Mock pool whose ``query`` resolves to an empty result by default."""
    pool = AsyncMock()
    pool.query = AsyncMock(return_value=_result())
    return pool


@pytest.fixture
def last_query(mock_pool):
    """Return the (text, params) of the most recent ``mock_pool.query`` call."""

    def _last() -> tuple[str, Sequence[Any]]:
        args = mock_pool.query.call_args[0]
        return args[0], list(args[1])

    return _last


@pytest.fixture
def sample_user_row() -> Dict[str, Any]:
    return {"id": 1, "name": "Devin Sanders", "email": "tristanjacobs@gmail.com", "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."}


@pytest.fixture
def sample_property_row() -> Dict[str, Any]:
    return {
        "id": 7,
        "owner_id": 1,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
        "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
        "cost_per_night": 93061,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
        "active": True,
    }
