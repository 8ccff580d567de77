"""Tests for person_rules: error aggregation, id ceiling and field mapping. Pure, no IO."""

from types import SimpleNamespace

import pytest

from app.core.errors import IdCeilingExceededError
from app.core.person_rules import (
    MAPPED_FIELDS, apply_mapped_fields, check_id_within_ceiling,
    extract_mapped_fields, format_field_errors,
)


def test_format_joins_each_error_with_trailing_semicolon():
    errors = [
        {"loc": ("name",), "msg": "String should have at least 2 characters"},
        {"loc": ("age",), "msg": "Input should be greater than or equal to 0"},
    ]
    assert format_field_errors(errors) == (
        "name - String should have at least 2 characters;"
        "age - Input should be greater than or equal to 0;"
    )


def test_format_nested_location_is_dotted():
    errors = [{"loc": ("body", "name"), "msg": "Field required"}]
    assert format_field_errors(errors) == "body.name - Field required;"


def test_format_empty_location_falls_back_to_body():
    assert format_field_errors([{"loc": (), "msg": "bad json"}]) == "body - bad json;"


def test_format_no_errors_is_empty_string():
    assert format_field_errors([]) == ""


def test_ceiling_allows_id_equal_to_ceiling():
    check_id_within_ceiling(10_000, 10_000)


def test_ceiling_rejects_id_above_ceiling():
    with pytest.raises(IdCeilingExceededError) as exc_info:
        check_id_within_ceiling(10_001, 10_000)
    assert exc_info.value.person_id == 10_001
    assert exc_info.value.ceiling == 10_000


def test_extract_reads_only_mapped_fields():
    source = SimpleNamespace(id=5, name="Alice", age=30, removed=True)
    assert extract_mapped_fields(source) == {"name": "Alice", "age": 30}


def test_apply_never_touches_id():
    target = SimpleNamespace(id=5, name="Alice", age=30)
    apply_mapped_fields(target, {"id": 99, "name": "Bob", "age": 41})
    assert (target.id, target.name, target.age) == (5, "Bob", 41)


def test_apply_skips_absent_keys():
    target = SimpleNamespace(name="Alice", age=30)
    apply_mapped_fields(target, {"age": 31})
    assert (target.name, target.age) == ("Alice", 31)


def test_mapped_fields_are_name_and_age():
    assert MAPPED_FIELDS == ("name", "age")
