"""
Database access layer for LightBnB.

This package turns data-access requests into parameterized SQL, runs them
through a connection pool and returns plain row dictionaries.

Structure:
- entities/: SQLModel table definitions
- schemas/: Pydantic input models (user/property creation, search filters)
- repositories/: Pool-backed data access that raises typed errors
- accessors.py: Log-and-return-None functions for existing callers
- pool.py: The QueryPool capability and its SQLAlchemy implementation
- queries.py: Pure statement builders
- sql.py: Composable SQL fragments with automatic placeholder numbering
- utils.py: Engine/pool creation and repository bundle
"""

from .base import Base
from .errors import DataAccessError, InvalidQueryError, QueryExecutionError
from .pool import QueryPool, QueryResult, SqlAlchemyPool
from .sql import CompiledQuery, Fragment, Param
from .utils import (
    RepoBundle,
    build_repos,
    create_all,
    create_engine,
    create_pool,
)

__all__ = [
    "Base",
    "CompiledQuery",
    "DataAccessError",
    "Fragment",
    "InvalidQueryError",
    "Param",
    "QueryExecutionError",
    "QueryPool",
    "QueryResult",
    "RepoBundle",
    "SqlAlchemyPool",
    "build_repos",
    "create_all",
    "create_engine",
    "create_pool",
]
