"""Unit tests for the placeholder rewriting and the SQLAlchemy-backed pool."""

from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from lightbnb.core.database.pool import QueryPool, QueryResult, SqlAlchemyPool, to_named_binds


class TestToNamedBinds:
    def test_rewrites_placeholders(self):
        stmt = to_named_binds("SELECT * FROM users WHERE id = $1 AND email = $2", [1, "a@b.com"])

        assert str(stmt) == "SELECT * FROM users WHERE id = :p1 AND email = :p2"

    def test_bound_values(self):
        stmt = to_named_binds("SELECT $2, $1", ["first", "second"])

        compiled = stmt.compile()
        assert compiled.params == {"p1": "first", "p2": "second"}

    def test_multi_digit_positions(self):
        params = list(range(1, 13))

        stmt = to_named_binds("SELECT $1, $12", params)

        assert str(stmt) == "SELECT :p1, :p12"
        assert stmt.compile().params == {"p1": 1, "p12": 12}

    def test_missing_value_raises(self):
        with pytest.raises(IndexError):
            to_named_binds("SELECT $3", [1, 2])

    def test_no_placeholders(self):
        assert str(to_named_binds("SELECT 1")) == "SELECT 1"


class TestSqlAlchemyPool:
    @pytest.fixture
    async def pool(self):
        engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
        pool = SqlAlchemyPool(engine)
        try:
            yield pool
        finally:
            await pool.dispose()

    async def test_satisfies_protocol(self, pool):
        assert isinstance(pool, QueryPool)

    async def test_select_returns_dict_rows(self, pool):
        result = await pool.query("SELECT $1 AS name, $2 AS nights", ["Ann", 3])

        assert isinstance(result, QueryResult)
        assert result.rows == [{"name": "Ann", "nights": 3}]
        assert result.row_count == 1

    async def test_write_then_read(self, pool):
        await pool.query("CREATE TABLE things (id INTEGER PRIMARY KEY, label TEXT)")
        inserted = await pool.query("INSERT INTO things (label) VALUES ($1) RETURNING *", ["lamp"])
        selected = await pool.query("SELECT label FROM things WHERE id = $1", [inserted.rows[0]["id"]])

        assert inserted.rows[0]["label"] == "lamp"
        assert selected.rows == [{"label": "lamp"}]

    async def test_update_reports_row_count(self, pool):
        await pool.query("CREATE TABLE things (id INTEGER PRIMARY KEY, label TEXT)")
        await pool.query("INSERT INTO things (label) VALUES ($1), ($2)", ["a", "b"])

        result = await pool.query("UPDATE things SET label = $1", ["c"])

        assert result.rows == []
        assert result.row_count == 2

    async def test_bad_sql_propagates(self, pool):
        with pytest.raises(Exception):
            await pool.query("SELECT * FROM missing_table")
