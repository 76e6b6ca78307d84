import random

import pytest

from binservice.errors import NotFound, StoreError
from binservice.models.domain import Truck, ZoneRecord
from binservice.services.people import (
    DEMO_USERS,
    DEMO_USERS_FLAG,
    PEOPLE_LIST_KEY,
    PeopleService,
    person_key,
)


@pytest.fixture
def service(cache, planner) -> PeopleService:
    return PeopleService(cache, planner)


@pytest.fixture
def seeded_relational(relational):
    relational.trucks[1] = Truck(truck_id=1, type_id=1, type_name="Compactador", status_id=1, status_name="Operativo")
    relational.trucks[2] = Truck(truck_id=2, type_id=2, type_name="Volcador", status_id=2, status_name="Taller")
    relational.zones = [
        ZoneRecord(zone_id=1, name="CHACARITA"),
        ZoneRecord(zone_id=2, name="MONTE CASTRO"),
        ZoneRecord(zone_id=3, name="BOEDO"),
    ]
    return relational


def test_seed_assigns_distinct_zones_and_operational_trucks(service, cache, seeded_relational) -> None:
    created = service.seed_people(seeded_relational, rng=random.Random(7))

    assert created == 3
    people = service.list_people()
    assert sorted(person.zone_id for person in people) == ["1", "2", "3"]
    assert {person.truck_id for person in people} == {"1"}
    assert all(person.status == "activo" for person in people)


def test_seed_respects_max_people(service, seeded_relational) -> None:
    assert service.seed_people(seeded_relational, max_people=2, rng=random.Random(1)) == 2


def test_seed_is_idempotent(service, cache, seeded_relational) -> None:
    service.seed_people(seeded_relational, rng=random.Random(3))
    before = list(cache.lists[PEOPLE_LIST_KEY])

    assert service.seed_people(seeded_relational, rng=random.Random(4)) == 0
    assert cache.lists[PEOPLE_LIST_KEY] == before


def test_seed_without_trucks_creates_nobody(service, relational) -> None:
    relational.zones = [ZoneRecord(zone_id=1, name="CHACARITA")]

    assert service.seed_people(relational) == 0


def test_people_in_zone_and_lookup(service, cache) -> None:
    cache.hash_set(person_key(1), {"id": "1", "zona_id": "3", "camion_id": "5", "nombre": "Persona_1"})
    cache.hash_set(person_key(2), {"id": "2", "zona_id": "1", "camion_id": "5", "nombre": "Persona_2"})
    cache.list_push(PEOPLE_LIST_KEY, person_key(1), person_key(2))

    assert [person.id for person in service.people_in_zone(3)] == ["1"]
    assert service.get_person(2).name == "Persona_2"
    with pytest.raises(NotFound):
        service.get_person(3)


def test_list_people_skips_unreadable_entries(service, cache, monkeypatch) -> None:
    cache.hash_set(person_key(1), {"id": "1", "zona_id": "1", "camion_id": "1"})
    cache.list_push(PEOPLE_LIST_KEY, person_key(1), person_key(2))
    original = cache.hash_get_all

    def flaky(key):
        if key == person_key(2):
            raise StoreError("cache", "hash get all", "WRONGTYPE")
        return original(key)

    monkeypatch.setattr(cache, "hash_get_all", flaky)

    assert [person.id for person in service.list_people()] == ["1"]


def test_demo_users_load_once(service, cache) -> None:
    assert service.load_demo_users() is True
    assert cache.values["user3@example.com"] == "3"
    assert cache.values[DEMO_USERS_FLAG] == "true"
    assert len(DEMO_USERS) == 10

    cache.values["user3@example.com"] = "changed"
    assert service.load_demo_users() is False
    assert cache.values["user3@example.com"] == "changed"


def test_route_for_email(service, cache, graph) -> None:
    graph.add_node("a", "BOEDO", -34.63, -58.41)
    service.load_demo_users()
    cache.hash_set(person_key(4), {"id": "4", "zona_id": "3", "zona_nombre": "BOEDO", "camion_id": "1"})

    route = service.route_for_email("user4@example.com")

    assert route.person_number == "4"
    assert route.zone_id == 3
    assert route.route.neighborhood == "BOEDO"
    assert len(route.route.points) == 1


def test_route_for_unknown_email(service) -> None:
    with pytest.raises(NotFound):
        service.route_for_email("nobody@example.com")


def test_email_lookup_loads_demo_users_on_demand(service, cache) -> None:
    assert DEMO_USERS_FLAG not in cache.values

    assert service.person_number_for_email("user7@example.com") == "7"
    assert cache.values[DEMO_USERS_FLAG] == "true"


def test_route_for_email_with_bad_zone(service, cache) -> None:
    cache.set("odd@example.com", "9")
    cache.hash_set(person_key(9), {"id": "9", "zona_id": "north"})

    with pytest.raises(ValueError):
        service.route_for_email("odd@example.com")
