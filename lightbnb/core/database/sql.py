"""
Composable SQL fragments with positional parameters.

A ``Fragment`` is an ordered sequence of raw SQL text pieces and ``Param``
markers. Fragments are combined with ``+`` and ``Fragment.join`` and only turned
into text when ``compile`` is called. At that point every ``Param`` becomes a
PostgreSQL-style positional placeholder (``$1``, ``$2``, ...) numbered in the
order the values appear, so the placeholder ``$k`` always refers to
``params[k - 1]``.

Example::

    where = Fragment.join(
        " AND ",
        [Fragment("city LIKE ", Param("%Van%")), Fragment("owner_id = ", Param(3))],
    )
    query = (Fragment("SELECT * FROM properties WHERE ") + where).compile()
    # query.text   == "SELECT * FROM properties WHERE city LIKE $1 AND owner_id = $2"
    # query.params == ["%Van%", 3]

Raw text pieces are never built from caller values; anything supplied by a
caller goes through ``Param``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple, Union


@dataclass(frozen=True)
class Param:
    """A value bound to a placeholder."""

    value: Any


Part = Union[str, Param]


@dataclass(frozen=True)
class CompiledQuery:
    """Statement text plus its bound values, ready for ``QueryPool.query``."""

    text: str
    params: List[Any] = field(default_factory=list)


class Fragment:
    """An immutable piece of SQL that carries its own bound values."""

    __slots__ = ("parts",)

    def __init__(self, *parts: Part) -> None:
        self.parts: Tuple[Part, ...] = tuple(p for p in parts if not (isinstance(p, str) and p == ""))

    def __add__(self, other: Union["Fragment", str]) -> "Fragment":
        if isinstance(other, str):
            return Fragment(*self.parts, other)
        if isinstance(other, Fragment):
            return Fragment(*self.parts, *other.parts)
        return NotImplemented

    def __radd__(self, other: str) -> "Fragment":
        if isinstance(other, str):
            return Fragment(other, *self.parts)
        return NotImplemented

    def __bool__(self) -> bool:
        return bool(self.parts)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Fragment) and self.parts == other.parts

    def __hash__(self) -> int:
        return hash(self.parts)

    def __repr__(self) -> str:
        return f"Fragment({', '.join(repr(p) for p in self.parts)})"

    @property
    def values(self) -> List[Any]:
        """Bound values in placeholder order."""
        return [p.value for p in self.parts if isinstance(p, Param)]

    @staticmethod
    def join(separator: str, fragments: Iterable["Fragment"]) -> "Fragment":
        """Join fragments with a raw SQL separator such as ``" AND "``.

        Empty fragments are skipped so optional clauses leave no stray separators.
        """
        parts: List[Part] = []
        for index, fragment in enumerate(f for f in fragments if f):
            if index:
                parts.append(separator)
            parts.extend(fragment.parts)
        return Fragment(*parts)

    def compile(self) -> CompiledQuery:
        """Flatten into statement text and a parameter list.

        Returns:
            CompiledQuery whose placeholders are numbered from 1 in the
            order their values were added.
        """
        chunks: List[str] = []
        params: List[Any] = []
        for part in self.parts:
            if isinstance(part, Param):
                params.append(part.value)
                chunks.append(f"${len(params)}")
            else:
                chunks.append(part)
        return CompiledQuery(text="".join(chunks), params=params)


def param(value: Any) -> Fragment:
    """Shortcut for a fragment that is a single placeholder."""
    return Fragment(Param(value))


def where_clause(conditions: Iterable[Fragment], keyword: str = "WHERE") -> Fragment:
    """Prefix the first condition with ``keyword`` and join the rest with ``AND``.

    Returns an empty fragment when there are no conditions.
    """
    conditions = [c for c in conditions if c]
    if not conditions:
        return Fragment()
    return Fragment(f"{keyword} ") + Fragment.join(" AND ", conditions)
