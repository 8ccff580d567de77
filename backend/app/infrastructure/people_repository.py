"""SQL People Repository: SQLAlchemy implementation of the PeopleRepository protocol.

Invariants:
    - One repository per AsyncSession; never commits implicitly
    - add() flushes so the store-assigned id is available before commit
    - Listings ordered by id ascending
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import PersonId
from app.models.person import Person


class SqlPeopleRepository:
    """Person persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_by_removed(self, removed: bool) -> list[Person]:
        result = await self._db.execute(
            select(Person)
            .where(Person.removed == removed)
            .order_by(Person.id),
        )
        return list(result.scalars().all())

    async def get(self, person_id: PersonId) -> Person | None:
        return await self._db.get(Person, person_id)

    async def add(self, person: Person) -> Person:
        self._db.add(person)
        await self._db.flush()
        return person

    async def commit(self) -> None:
        await self._db.commit()

    async def rollback(self) -> None:
        await self._db.rollback()
