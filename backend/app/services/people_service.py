"""People Service: lookups, soft-delete filtering and persistence for Person records.

Invariants:
    - get_all_people(removed) never mixes active and soft-deleted rows
    - find_by_id raises PersonNotFoundError, never returns None
    - save() commits only when the assigned id is within the ceiling; otherwise rolls back
    - update() copies mapped fields only; id is never reassigned
    - delete() is unconditional: a missing id is logged and ignored

Design Decisions:
    - Depends on the PeopleRepository protocol, not on SQLAlchemy directly
    - DTO <-> entity conversion lives here so routes stay thin
"""

import logging

from app.core.domain_types import PersonId
from app.core.person_rules import (
    apply_mapped_fields, check_id_within_ceiling, extract_mapped_fields,
)
from app.core.errors import IdCeilingExceededError, PersonNotFoundError
from app.core.repository_protocols import PeopleRepository
from app.models.person import Person
from app.schemas.person import PersonDTO

logger = logging.getLogger(__name__)


class PeopleService:
    """Person use cases over a PeopleRepository."""

    def __init__(self, repository: PeopleRepository, id_ceiling: int):
        self._repo = repository
        self._id_ceiling = id_ceiling

    async def get_all_people(self, removed: bool) -> list[Person]:
        return await self._repo.list_by_removed(removed)

    async def find_by_id(self, person_id: PersonId) -> Person:
        person = await self._repo.get(person_id)
        if person is None:
            raise PersonNotFoundError(person_id)
        return person

    async def save(self, person: Person) -> Person:
        """Persist a new person, enforcing the id ceiling on the assigned id."""
        await self._repo.add(person)
        try:
            check_id_within_ceiling(person.id, self._id_ceiling)
        except IdCeilingExceededError:
            await self._repo.rollback()
            logger.warning(
                f"Rejected person with id {person.id} above ceiling {self._id_ceiling}",
                extra={"person_id": person.id, "error_code": "ID_CEILING_EXCEEDED"},
            )
            raise
        await self._repo.commit()
        logger.info(f"Person {person.id} created", extra={"person_id": person.id})
        return person

    async def update(self, dto: PersonDTO, person_id: PersonId) -> Person:
        person = await self.find_by_id(person_id)
        apply_mapped_fields(person, dto.model_dump())
        await self._repo.commit()
        logger.info(f"Person {person_id} updated", extra={"person_id": person_id})
        return person

    async def delete(self, person_id: PersonId) -> None:
        person = await self._repo.get(person_id)
        if person is None:
            logger.warning(
                f"Delete ignored: person {person_id} does not exist",
                extra={"person_id": person_id},
            )
            return
        person.mark_removed()
        await self._repo.commit()
        logger.info(f"Person {person_id} soft-deleted", extra={"person_id": person_id})

    @staticmethod
    def convert_from_person_to_dto(person: Person) -> PersonDTO:
        return PersonDTO.model_validate(extract_mapped_fields(person))

    @staticmethod
    def convert_from_dto_to_person(dto: PersonDTO) -> Person:
        person = Person()
        apply_mapped_fields(person, dto.model_dump())
        return person
