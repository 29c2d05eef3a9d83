from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from jobly.errors import InvalidRequestError


LIKE_ESCAPE = "!"

COMPANY_FILTER_KEYS = frozenset({"name", "minEmployees", "maxEmployees"})
JOB_FILTER_KEYS = frozenset({"title", "minSalary", "hasEquity"})


@dataclass
class WhereClause:
    """AND-ed predicates with their bound values, numbered `$start`, `$start + 1`, ..."""

    start: int = 1
    predicates: list[str] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)

    def add(self, predicate: str, *values: Any) -> None:
        """Add a predicate; each `{}` in it becomes the placeholder of the next value."""
        placeholders = []
        for value in values:
            placeholders.append(f"${self.start + len(self.values)}")
            self.values.append(value)
        self.predicates.append(predicate.format(*placeholders))

    @property
    def sql(self) -> str:
        if not self.predicates:
            return ""
        return " WHERE " + " AND ".join(self.predicates)

    def __bool__(self) -> bool:
        return bool(self.predicates)


def contains_pattern(term: str) -> str:
    """Lower-cased `%term%` LIKE pattern with LIKE wildcards in `term` escaped."""
    escaped = (
        term.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _check_keys(filters: Mapping[str, Any], allowed: frozenset[str]) -> None:
    unknown = sorted(set(filters) - allowed)
    if unknown:
        raise InvalidRequestError(f"Unknown filter(s): {', '.join(unknown)}")


def _int_or_none(filters: Mapping[str, Any], key: str) -> int | None:
    value = filters.get(key)
    if value is None:
        return None
    # Values are parsed at the HTTP boundary; strings here are a caller bug, not input to coerce.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequestError(f"{key} must be an integer")
    if value < 0:
        raise InvalidRequestError(f"{key} must not be negative")
    return value


def _contains(where: WhereClause, column: str, term: Any) -> None:
    if term is None or term == "":
        return
    if not isinstance(term, str):
        raise InvalidRequestError(f"{column} filter must be a string")
    where.add(f"LOWER({column}) LIKE {{}} ESCAPE '{LIKE_ESCAPE}'", contains_pattern(term))


def build_company_filters(filters: Mapping[str, Any] | None, *, start: int = 1) -> WhereClause:
    """Compose the WHERE clause for a company search.

    Recognized keys: `name` (case-insensitive substring), `minEmployees` and
    `maxEmployees` (inclusive bounds). A `minEmployees` greater than `maxEmployees`
    is rejected with InvalidRequestError.
    """

    where = WhereClause(start=start)
    if not filters:
        return where

    _check_keys(filters, COMPANY_FILTER_KEYS)
    min_employees = _int_or_none(filters, "minEmployees")
    max_employees = _int_or_none(filters, "maxEmployees")
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise InvalidRequestError("minEmployees cannot be greater than maxEmployees")

    _contains(where, "name", filters.get("name"))
    if min_employees is not None:
        where.add("num_employees >= {}", min_employees)
    if max_employees is not None:
        where.add("num_employees <= {}", max_employees)
    return where


def build_job_filters(filters: Mapping[str, Any] | None, *, start: int = 1) -> WhereClause:
    """Compose the WHERE clause for a job search.

    Recognized keys: `title` (case-insensitive substring), `minSalary` (inclusive),
    `hasEquity` (true keeps only jobs with equity > 0; false adds nothing).
    """

    where = WhereClause(start=start)
    if not filters:
        return where

    _check_keys(filters, JOB_FILTER_KEYS)
    min_salary = _int_or_none(filters, "minSalary")
    has_equity = filters.get("hasEquity")
    if has_equity is not None and not isinstance(has_equity, bool):
        raise InvalidRequestError("hasEquity must be a boolean")

    _contains(where, "title", filters.get("title"))
    if min_salary is not None:
        where.add("salary >= {}", min_salary)
    if has_equity:
        where.add("equity > 0")
    return where
