"""People Routes: CRUD endpoints for the Person resource.

Invariants:
    - Routes never contain business logic (delegate to PeopleService)
    - Request bodies validated by validated_person_dto; failures aggregate into one
      PersonNotCreatedError message and nothing is persisted
    - /people/deleted registered before /people/{person_id}
    - PUT and DELETE answer 200 with an empty body; POST answers 200 "OK"

Design Decisions:
    - Body taken as raw JSON and validated explicitly so field errors surface as
      PersonNotCreatedError instead of FastAPI's generic 422
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.domain_types import PersonId
from app.core.errors import PersonNotCreatedError
from app.core.person_rules import format_field_errors
from app.infrastructure.database import get_db
from app.infrastructure.people_repository import SqlPeopleRepository
from app.schemas.person import PersonDTO, PersonErrorResponse
from app.services.people_service import PeopleService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/people", tags=["people"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": PersonErrorResponse},
}


def get_people_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> PeopleService:
    return PeopleService(SqlPeopleRepository(db), settings.person_id_ceiling)


def validated_person_dto(
    payload: dict[str, Any] = Body(...),
) -> PersonDTO:
    """Validate the request body, raising PersonNotCreatedError with every field error."""
    try:
        return PersonDTO.model_validate(payload)
    except ValidationError as e:
        raise PersonNotCreatedError(format_field_errors(e.errors()))


@router.get("", response_model=list[PersonDTO])
async def get_all_people(service: PeopleService = Depends(get_people_service)):
    """List people that are not soft-deleted."""
    people = await service.get_all_people(removed=False)
    return [service.convert_from_person_to_dto(p) for p in people]


@router.get("/deleted", response_model=list[PersonDTO])
async def get_all_removed_people(
    service: PeopleService = Depends(get_people_service),
):
    """List soft-deleted people."""
    people = await service.get_all_people(removed=True)
    return [service.convert_from_person_to_dto(p) for p in people]


@router.get(
    "/{person_id}", response_model=PersonDTO, responses=_ERROR_RESPONSES,
)
async def get_person_by_id(
    person_id: int, service: PeopleService = Depends(get_people_service),
):
    person = await service.find_by_id(PersonId(person_id))
    return service.convert_from_person_to_dto(person)


@router.post(
    "",
    responses={
        **_ERROR_RESPONSES,
        status.HTTP_409_CONFLICT: {"model": PersonErrorResponse},
    },
)
async def save_person(
    dto: PersonDTO = Depends(validated_person_dto),
    service: PeopleService = Depends(get_people_service),
) -> str:
    person = service.convert_from_dto_to_person(dto)
    await service.save(person)
    return "OK"


@router.put("/{person_id}", responses=_ERROR_RESPONSES)
async def update_person_by_id(
    person_id: int,
    dto: PersonDTO = Depends(validated_person_dto),
    service: PeopleService = Depends(get_people_service),
):
    await service.update(dto, PersonId(person_id))
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{person_id}")
async def delete_person_by_id(
    person_id: int, service: PeopleService = Depends(get_people_service),
):
    await service.delete(PersonId(person_id))
    return Response(status_code=status.HTTP_200_OK)
