"""Test configuration for database e2e tests.

This module provides a real ``SqlAlchemyPool`` over in-memory SQLite with the
LightBnB schema created and a small seeded data set.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from lightbnb.core.database.pool import SqlAlchemyPool
from lightbnb.core.database.utils import create_all

USERS = [
    ("Devin Sanders", "tristanjacobs@gmail.com", "password"),
    ("Eva Stanley", "sebastianguerra@ymail.com", "password"),
    ("Dominic Parks", "victoriablackwell@outlook.com", "password"),
]

# (owner_id, title, city, cost_per_night in cents)
PROPERTIES = [
    (1, "Speed lamp", "Vancouver", 15000),
    (2, "Blank corner", "Victoria", 30000),
    (1, "Habit mix", "North Vancouver", 8000),
]

# (start_date, end_date, property_id, guest_id)
RESERVATIONS = [
    ("2026-03-01", "2026-03-05", 1, 2),
    ("2026-01-10", "2026-01-12", 3, 2),
    ("2026-02-01", "2026-02-03", 2, 1),
]

# (guest_id, property_id, reservation_id, rating)
REVIEWS = [
    (2, 1, 1, 5),
    (2, 1, 1, 4),
    (2, 3, 2, 3),
    (1, 2, 3, 2),
]


@pytest.fixture(scope="function")
async def sqlite_pool() -> AsyncGenerator[SqlAlchemyPool, None]:
    """Empty-schema pool over in-memory SQLite."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await create_all(engine)
    pool = SqlAlchemyPool(engine)
    try:
        yield pool
    finally:
        await pool.dispose()


@pytest.fixture(scope="function")
async def seeded_pool(sqlite_pool: SqlAlchemyPool) -> SqlAlchemyPool:
    """Pool with users, properties, reservations and reviews loaded."""
    for row in USERS:
        await sqlite_pool.query("INSERT INTO users (name, email, password) VALUES ($1, $2, $3)", row)
    for row in PROPERTIES:
        await sqlite_pool.query(
            "INSERT INTO properties (owner_id, title, city, cost_per_night) VALUES ($1, $2, $3, $4)", row
        )
    for row in RESERVATIONS:
        await sqlite_pool.query(
            "INSERT INTO reservations (start_date, end_date, property_id, guest_id) VALUES ($1, $2, $3, $4)", row
        )
    for row in REVIEWS:
        await sqlite_pool.query(
            "INSERT INTO property_reviews (guest_id, property_id, reservation_id, rating) VALUES ($1, $2, $3, $4)",
            row,
        )
    return sqlite_pool
