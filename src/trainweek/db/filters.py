"""Conjunctive filters shared by the SQLite and in-memory repositories.

A ``FilterBuilder`` folds an ordered list of optional predicates into one
``Filter``. Predicates whose value is absent are skipped, so callers can pass
search parameters straight through. The same ``Filter`` renders to a SQL
``WHERE`` clause and evaluates against records in memory.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

LIKE_ESCAPE = "\\"

# SQL function registered on every connection (see engine.connect); SQLite's
# own LIKE and lower() only fold ASCII letters
LOWER_FUNCTION = "unicode_lower"


def unicode_lower(value: Any) -> Any:
    """Lowercase text the same way for SQL and in-memory matching."""
    if value is None:
        return None
    return str(value).lower()


def _plain(value: Any) -> Any:
    """Unwrap enums to the value stored in the database."""
    if isinstance(value, Enum):
        return value.value
    return value


def _escape_like(value: str) -> str:
    for char in (LIKE_ESCAPE, "%", "_"):
        value = value.replace(char, LIKE_ESCAPE + char)
    return value


@dataclass(frozen=True)
class Predicate:
    """One condition on one column/attribute."""

    column: str
    op: str  # "eq" or "contains"
    value: Any

    def to_sql(self) -> tuple[str, Any]:
        if self.op == "eq":
            return f"{self.column} = ?", _plain(self.value)
        if self.op == "contains":
            return (
                f"{LOWER_FUNCTION}({self.column}) LIKE ? ESCAPE '{LIKE_ESCAPE}'",
                f"%{_escape_like(unicode_lower(self.value))}%",
            )
        raise ValueError(f"Unknown operator: {self.op}")

    def matches(self, record: Any) -> bool:
        actual = getattr(record, self.column)
        if self.op == "eq":
            return _plain(actual) == _plain(self.value)
        if self.op == "contains":
            if actual is None:
                return False
            return unicode_lower(self.value) in unicode_lower(actual)
        raise ValueError(f"Unknown operator: {self.op}")


@dataclass(frozen=True)
class Filter:
    """A conjunction of predicates. An empty filter matches everything."""

    predicates: tuple[Predicate, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.predicates)

    def columns(self) -> set[str]:
        return {p.column for p in self.predicates}

    def where_clause(self) -> tuple[str, list[Any]]:
        """Render as ``WHERE a = ? AND b LIKE ?`` plus its parameters."""
        if not self.predicates:
            return "", []
        fragments = []
        params = []
        for predicate in self.predicates:
            sql, param = predicate.to_sql()
            fragments.append(sql)
            params.append(param)
        return "WHERE " + " AND ".join(fragments), params

    def matches(self, record: Any) -> bool:
        return all(p.matches(record) for p in self.predicates)


class FilterBuilder:
    """Accumulates optional predicates in call order."""

    def __init__(self):
        self._predicates: list[Predicate] = []

    def equals(self, column: str, value: Any) -> "FilterBuilder":
        """Exact match; skipped when ``value`` is None."""
        if value is not None:
            self._predicates.append(Predicate(column, "eq", value))
        return self

    def contains(self, column: str, value: str | None) -> "FilterBuilder":
        """Case-insensitive substring match; skipped when ``value`` is empty."""
        if value:
            self._predicates.append(Predicate(column, "contains", value))
        return self

    def build(self) -> Filter:
        return Filter(tuple(self._predicates))
