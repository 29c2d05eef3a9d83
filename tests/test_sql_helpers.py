from __future__ import annotations

import pytest

from jobly.core.sql import build_set_clause, next_placeholder
from jobly.errors import InvalidRequestError


def test_set_clause_single_field_untranslated() -> None:
    set_clause, values = build_set_clause({"name": "Acme"}, {})
    assert set_clause == '"name"=$1'
    assert values == ["Acme"]


def test_set_clause_translates_external_names() -> None:
    set_clause, values = build_set_clause({"numEmployees": 5}, {"numEmployees": "num_employees"})
    assert set_clause == '"num_employees"=$1'
    assert values == [5]


def test_set_clause_numbers_fields_in_insertion_order() -> None:
    data = {"firstName": "Aliya", "age": 32, "logoUrl": None}
    set_clause, values = build_set_clause(data, {"firstName": "first_name", "logoUrl": "logo_url"})

    fragments = set_clause.split(", ")
    assert fragments == ['"first_name"=$1', '"age"=$2', '"logo_url"=$3']
    # Explicit nulls are kept so a column can be cleared.
    assert values == ["Aliya", 32, None]


def test_set_clause_without_translation_table() -> None:
    set_clause, values = build_set_clause({"title": "Engineer", "salary": 10})
    assert set_clause == '"title"=$1, "salary"=$2'
    assert values == ["Engineer", 10]


def test_set_clause_rejects_empty_update() -> None:
    with pytest.raises(InvalidRequestError):
        build_set_clause({}, {"numEmployees": "num_employees"})


def test_fragment_count_matches_value_count() -> None:
    data = {f"f{i}": i for i in range(12)}
    set_clause, values = build_set_clause(data)
    fragments = set_clause.split(", ")
    assert len(fragments) == len(values) == 12
    for i, fragment in enumerate(fragments, start=1):
        assert fragment.endswith(f"=${i}")
        assert values[i - 1] == i - 1


def test_next_placeholder_continues_numbering() -> None:
    _, values = build_set_clause({"name": "Acme", "description": "x"})
    assert next_placeholder(values) == "$3"
    assert next_placeholder([]) == "$1"
