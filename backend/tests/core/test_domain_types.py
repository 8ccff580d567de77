"""Domain Types: verifies identity wrappers and defaults."""

from app.core.domain_types import DEFAULT_ID_CEILING, PersonId


def test_person_id_wraps_int():
    assert PersonId(42) == 42


def test_default_id_ceiling_is_ten_thousand():
    assert DEFAULT_ID_CEILING == 10_000
