"""Collection staff kept in the cache.

Each person is a hash ``persona:<n>`` and every such key is listed in the
``personas`` list. Emails map to person numbers through plain string keys.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone

from ..errors import NotFound, StoreError
from ..models.domain import Person
from ..persistence.cache import CacheStore
from ..persistence.relational import RelationalStore
from .routing.models import PersonRoute
from .routing.planner import ZoneRoutePlanner

logger = logging.getLogger(__name__)

PEOPLE_LIST_KEY = "personas"
PERSON_KEY_PREFIX = "persona:"
DEMO_USERS_FLAG = "dummy_users_loaded"
DEMO_USERS: dict[str, str] = {f"user{number}@example.com": str(number) for number in range(1, 11)}


def person_key(person_id: int | str) -> str:
    return f"{PERSON_KEY_PREFIX}{person_id}"


def _person_from_hash(data: dict[str, str]) -> Person:
    return Person(
        id=data.get("id", ""),
        zone_id=data.get("zona_id", ""),
        truck_id=data.get("camion_id", ""),
        zone_name=data.get("zona_nombre"),
        name=data.get("nombre"),
        status=data.get("estado"),
    )


class PeopleService:
    def __init__(self, cache: CacheStore, planner: ZoneRoutePlanner | None = None) -> None:
        self._cache = cache
        self._planner = planner

    def list_people(self) -> list[Person]:
        people: list[Person] = []
        for key in self._cache.list_range(PEOPLE_LIST_KEY):
            try:
                data = self._cache.hash_get_all(key)
            except StoreError as exc:
                logger.warning(f"Skipping {key}: {exc}")
                continue
            if data:
                people.append(_person_from_hash(data))
        return people

    def get_person(self, person_id: int) -> Person:
        key = person_key(person_id)
        if not self._cache.exists(key):
            raise NotFound(f"Person {person_id} not found.")
        return _person_from_hash(self._cache.hash_get_all(key))

    def people_in_zone(self, zone_id: int) -> list[Person]:
        return [
            person
            for person in self.list_people()
            if person.zone_id.isdigit() and int(person.zone_id) == zone_id
        ]

    def person_number_for_email(self, email: str) -> str:
        self.load_demo_users()
        number = self._cache.get(email)
        if number is None:
            raise NotFound(f"No user registered for email '{email}'.")
        return number

    def route_for_email(self, email: str) -> PersonRoute:
        """Resolve email -> person -> zone and return that zone's route."""
        if self._planner is None:
            raise RuntimeError("PeopleService was built without a route planner.")
        number = self.person_number_for_email(email)
        data = self._cache.hash_get_all(person_key(number))
        if not data:
            raise NotFound(f"Person {number} not found.")
        zone_value = data.get("zona_id", "")
        try:
            zone_id = int(zone_value)
        except ValueError:
            raise ValueError(f"Person {number} has an invalid zone id '{zone_value}'.") from None
        return PersonRoute(
            email=email,
            person_number=number,
            zone_id=zone_id,
            zone_name=data.get("zona_nombre"),
            route=self._planner.get_ordered_points(zone_id),
        )

    def seed_people(
        self,
        relational: RelationalStore,
        *,
        max_people: int = 10,
        rng: random.Random | None = None,
    ) -> int:
        """Create the staff roster once, from operational trucks and zones.

        Each person gets a distinct zone and a random operational truck. Does
        nothing when the roster already exists. Returns the number created.
        """
        if self._cache.exists(PEOPLE_LIST_KEY):
            logger.info("People roster already exists, skipping seeding")
            return 0

        trucks = relational.list_operational_trucks()
        if not trucks:
            logger.warning("No operational trucks found, cannot seed people")
            return 0
        zones = relational.list_zones()
        if not zones:
            logger.warning("No zones found, cannot seed people")
            return 0

        rng = rng or random.Random()
        shuffled = list(zones)
        rng.shuffle(shuffled)
        count = min(max_people, len(shuffled))
        created_at = datetime.now(timezone.utc).isoformat()

        created = 0
        for number, zone in enumerate(shuffled[:count], start=1):
            truck = rng.choice(trucks)
            key = person_key(number)
            try:
                self._cache.hash_set(
                    key,
                    {
                        "id": str(number),
                        "zona_id": str(zone.zone_id),
                        "zona_nombre": zone.name,
                        "camion_id": str(truck.truck_id),
                        "camion_tipo": "" if truck.type_id is None else str(truck.type_id),
                        "nombre": f"Persona_{number}",
                        "estado": "activo",
                        "created_at": created_at,
                    },
                )
                self._cache.list_push(PEOPLE_LIST_KEY, key)
            except StoreError as exc:
                logger.warning(f"Failed to seed {key}: {exc}")
                continue
            created += 1
            logger.debug(f"Seeded {key} - zone {zone.name} ({zone.zone_id}), truck {truck.truck_id}")

        logger.info(f"Seeded {created} people with {len(trucks)} operational trucks and {len(zones)} zones")
        return created

    def load_demo_users(self, users: dict[str, str] | None = None) -> bool:
        """Register the demo email -> person number lookups once.

        Returns True when the users were written, False when already present.
        """
        if self._cache.get(DEMO_USERS_FLAG) == "true":
            return False
        for email, number in (users or DEMO_USERS).items():
            self._cache.set(email, number)
        self._cache.set(DEMO_USERS_FLAG, "true")
        logger.info("Demo users loaded into cache")
        return True
