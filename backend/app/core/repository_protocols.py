"""Boundary Protocols: contracts between the service layer and persistence.

Invariants:
    - Services depend on PeopleRepository, never on SQLAlchemy queries directly
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from app.core.domain_types import PersonId


class PersonLike(Protocol):
    """Structural contract for Person objects handled by the service layer."""
    id: int
    name: str
    age: int
    removed: bool


class PeopleRepository(Protocol):
    """Contract for person persistence, implemented by infrastructure."""
    async def list_by_removed(self, removed: bool) -> list[PersonLike]: ...
    async def get(self, person_id: PersonId) -> PersonLike | None: ...
    async def add(self, person: PersonLike) -> PersonLike: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
