"""Unit tests for the user repository.

Tests repository operations with a mocked pool to ensure statements and
result shaping work without a real database.
"""

from __future__ import annotations

import pytest

from lightbnb.core.database.errors import InvalidQueryError, QueryExecutionError
from lightbnb.core.database.repositories.users import UserRepository


class TestUserRepository:
    """Tests for UserRepository operations."""

    @pytest.fixture
    def repository(self, mock_pool):
        return UserRepository(mock_pool)

    async def test_get_by_email_found(self, repository, mock_pool, make_result, sample_user_row, last_query):
        mock_pool.query.return_value = make_result([sample_user_row])

        result = await repository.get_by_email(sample_user_row["email"])

        assert result == sample_user_row
        mock_pool.query.assert_awaited_once()
        assert last_query() == ("SELECT * FROM users WHERE email = $1", [sample_user_row["email"]])

    async def test_get_by_email_not_found(self, repository):
        assert await repository.get_by_email("nobody@example.com") is None

    async def test_get_by_email_returns_first_row(self, repository, mock_pool, make_result, sample_user_row):
        second = dict(sample_user_row, id=2)
        mock_pool.query.return_value = make_result([sample_user_row, second])

        assert await repository.get_by_email(sample_user_row["email"]) == sample_user_row

    async def test_get_by_id(self, repository, mock_pool, make_result, sample_user_row, last_query):
        mock_pool.query.return_value = make_result([sample_user_row])

        result = await repository.get_by_id(1)

        assert result == sample_user_row
        assert last_query() == ("SELECT * FROM users WHERE id = $1", [1])

    async def test_get_by_id_not_found(self, repository):
        assert await repository.get_by_id(999) is None

    async def test_create(self, repository, mock_pool, make_result, sample_user_row, last_query):
        mock_pool.query.return_value = make_result([sample_user_row])
        payload = {k: sample_user_row[k] for k in ("name", "email", "password")}

        result = await repository.create(payload)

        assert result == sample_user_row
        text, params = last_query()
        assert text.startswith("INSERT INTO users (name, email, password) VALUES ($1, $2, $3)")
        assert params == [payload["name"], payload["email"], payload["password"]]

    async def test_create_invalid_payload_does_not_touch_pool(self, repository, mock_pool):
        with pytest.raises(InvalidQueryError):
            await repository.create({"name": "only a name"})

        mock_pool.query.assert_not_awaited()

    async def test_create_without_returned_row(self, repository):
        with pytest.raises(QueryExecutionError):
            await repository.create({"name": "a", "email": "b", "password": "c"})

    async def test_pool_failure_is_wrapped(self, repository, mock_pool):
        cause = ConnectionRefusedError("connect ECONNREFUSED 127.0.0.1:5432")
        mock_pool.query.side_effect = cause

        with pytest.raises(QueryExecutionError) as exc_info:
            await repository.get_by_email("a@b.com")

        error = exc_info.value
        assert error.__cause__ is cause
        assert "ECONNREFUSED" in str(error)
        assert error.sql == "SELECT * FROM users WHERE email = $1"
        assert error.params == ["a@b.com"]
        mock_pool.query.assert_awaited_once()
