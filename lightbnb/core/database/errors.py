"""Error types for the LightBnB data-access layer.

Purpose:
- Give repository callers a typed way to tell "nothing matched" (``None`` or
  an empty list) apart from "the statement did not run".
- Keep the failing statement and its bound values around for diagnosis.

Usage:
- Catch ``DataAccessError`` for any failure raised by a repository.
- ``QueryExecutionError`` wraps whatever the pool raised; the original
  exception is available as ``__cause__``.
- ``InvalidQueryError`` is raised before the pool is touched, when a statement
  cannot be built from the given input.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class DataAccessError(Exception):
    """Base error for all data-access failures."""


class QueryExecutionError(DataAccessError):
    """Raised when the pool rejects a statement (bad SQL, constraint, connectivity).

    Args:
        message: Human-readable error description, usually the driver's message.
        sql: The statement text that was sent to the pool.
        params: The bound values sent along with it.
    """

    def __init__(self, message: str, *, sql: str, params: Optional[Sequence[Any]] = None) -> None:
        super().__init__(message)
        self.sql = sql
        self.params = list(params or [])


class InvalidQueryError(DataAccessError):
    """Raised when the input cannot produce a valid statement."""
