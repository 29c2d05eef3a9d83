from __future__ import annotations

from typing import Any, Mapping

from jobly.errors import InvalidRequestError


def build_set_clause(
    update_fields: Mapping[str, Any],
    name_translation: Mapping[str, str] | None = None,
) -> tuple[str, list[Any]]:
    """Build the SET clause of a partial UPDATE.

    Keys are external field names; `name_translation` maps them to storage columns and
    keys without an entry are used as-is. Placeholders are numbered from 1 in the
    mapping's iteration order, so callers append their own trailing parameters (the
    WHERE key) at position `len(values) + 1`.

    >>> build_set_clause({"name": "Acme", "numEmployees": 5}, {"numEmployees": "num_employees"})
    ('"name"=$1, "num_employees"=$2', ['Acme', 5])

    Column names are not validated: the translation table and the callers' field sets
    must only ever contain fixed, trusted column names.
    """

    if not update_fields:
        raise InvalidRequestError("No data supplied")

    translation = name_translation or {}
    fragments: list[str] = []
    values: list[Any] = []
    for position, (field, value) in enumerate(update_fields.items(), start=1):
        column = translation.get(field, field)
        fragments.append(f'"{column}"=${position}')
        values.append(value)

    return ", ".join(fragments), values


def next_placeholder(values: list[Any]) -> str:
    """Placeholder for the parameter that follows `values`."""
    return f"${len(values) + 1}"
