"""LightBnB.

This package contains the data-access layer of the LightBnB property rental
application: the code that turns a caller's intent (look up a user, search
properties, list a guest's reservations) into a parameterized SQL statement,
runs it through a connection pool and hands back plain row records.

High-level architecture
-----------------------

- **Pool**: an async capability exposing ``query(text, params)``. The package
  ships ``SqlAlchemyPool`` on top of SQLAlchemy's async engine, but any object
  with the same method works.
- **Fragments and builders**: SQL is composed from ``Fragment`` objects that
  carry their own bound values. Placeholders (``$1``, ``$2``, ...) are numbered
  only when a fragment is compiled, so builders never track indices by hand.
- **Repositories**: one per table family (users, reservations, properties).
  They take the pool explicitly and raise typed ``DataAccessError`` subclasses.
- **Accessors**: module-level functions with the classic LightBnB contract.
  They log failures and return ``None`` instead of raising.

Typical workflow
----------------

1. Create a pool with ``lightbnb.core.database.utils.create_pool``.
2. Build repositories with ``build_repos(pool)``.
3. Call e.g. ``await repos.properties.search({"city": "Vancouver"})``.
4. Dispose of the pool at shutdown with ``await pool.dispose()``.
"""
