"""Staff (persona) endpoints backed by the cache."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...models.domain import Person
from ...schemas.reference import PersonListResponse, PersonModel, ZonePeopleResponse
from ...services.people import PeopleService
from ..dependencies import get_people_service
from ..errors import http_error

router = APIRouter(prefix="/personas", tags=["personas"])


def _person_model(person: Person) -> PersonModel:
    return PersonModel(
        id=person.id,
        zona_id=person.zone_id,
        camion_id=person.truck_id,
        zona_nombre=person.zone_name,
        nombre=person.name,
        estado=person.status,
    )


@router.get("", response_model=PersonListResponse, status_code=status.HTTP_200_OK)
def list_people(people: PeopleService = Depends(get_people_service)) -> PersonListResponse:
    try:
        persons = people.list_people()
    except Exception as exc:
        raise http_error(exc, "list people") from exc
    return PersonListResponse(personas=[_person_model(person) for person in persons], total=len(persons))


@router.get("/zona/{zone_id}", response_model=ZonePeopleResponse, status_code=status.HTTP_200_OK)
def people_in_zone(zone_id: int, people: PeopleService = Depends(get_people_service)) -> ZonePeopleResponse:
    try:
        persons = people.people_in_zone(zone_id)
    except Exception as exc:
        raise http_error(exc, f"list people in zone {zone_id}") from exc
    return ZonePeopleResponse(
        zona=zone_id,
        personas=[_person_model(person) for person in persons],
        total=len(persons),
    )


@router.get("/{person_id}", response_model=PersonModel, status_code=status.HTTP_200_OK)
def get_person(person_id: int, people: PeopleService = Depends(get_people_service)) -> PersonModel:
    try:
        return _person_model(people.get_person(person_id))
    except Exception as exc:
        raise http_error(exc, f"get person {person_id}") from exc
