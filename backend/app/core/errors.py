"""Error Hierarchy: typed exceptions for every People API failure mode.

Invariants:
    - Every error has a message (str), a code (str) and a fixed http_status
    - to_response() produces the uniform {message, timestamp} envelope
    - Not-found maps to 400 and id-ceiling to 409; both are part of the public contract
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PeopleError base: one FastAPI handler catches all
    - timestamp captured at raise time, not at render time
"""

from datetime import datetime, timezone


class PeopleError(Exception):
    """Base exception for all People API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        http_status: int = 500,
        timestamp: datetime | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.timestamp = timestamp or datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to the PersonErrorResponse body."""
        return {
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }


# ─── Domain Errors ──────────────────────────────────────────────

class PersonNotFoundError(PeopleError):
    """No person with the requested id."""
    def __init__(self, person_id: int):
        super().__init__(
            f"Person with id {person_id} not found",
            "PERSON_NOT_FOUND", 400,
        )
        self.person_id = person_id


class PersonNotCreatedError(PeopleError):
    """Request body failed validation; message aggregates every field error."""
    def __init__(self, message: str):
        super().__init__(message, "PERSON_NOT_CREATED", 400)


class IdCeilingExceededError(PeopleError):
    """Store assigned an id above the configured ceiling."""
    def __init__(self, person_id: int, ceiling: int):
        super().__init__(
            f"Person id {person_id} exceeds the maximum allowed id {ceiling}",
            "ID_CEILING_EXCEEDED", 409,
        )
        self.person_id = person_id
        self.ceiling = ceiling


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(PeopleError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", 503,
        )
        self.operation = operation
