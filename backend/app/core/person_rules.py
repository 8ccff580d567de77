"""Person Rules: pure helpers for validation messages, id ceiling and field mapping.

Invariants:
    - No IO, no async, no DB access
    - Field error message format: "<field> - <message>;" repeated, in error order
    - MAPPED_FIELDS is the single list of fields shared by DTO and entity
"""

from typing import Any, Iterable

from app.core.errors import IdCeilingExceededError

MAPPED_FIELDS = ("name", "age")


def format_field_errors(errors: Iterable[dict[str, Any]]) -> str:
    """Join pydantic-style errors into one "field - message;" string."""
    parts = []
    for error in errors:
        field = ".".join(str(loc) for loc in error.get("loc", ())) or "body"
        parts.append(f"{field} - {error.get('msg', 'invalid value')};")
    return "".join(parts)


def check_id_within_ceiling(person_id: int, ceiling: int) -> None:
    """Raise IdCeilingExceededError when person_id is above ceiling."""
    if person_id > ceiling:
        raise IdCeilingExceededError(person_id, ceiling)


def extract_mapped_fields(source: Any) -> dict[str, Any]:
    """Read the mapped fields off a DTO or entity by attribute name."""
    return {name: getattr(source, name) for name in MAPPED_FIELDS}


def apply_mapped_fields(target: Any, values: dict[str, Any]) -> None:
    """Copy mapped fields onto target. Never touches id."""
    for name in MAPPED_FIELDS:
        if name in values:
            setattr(target, name, values[name])
