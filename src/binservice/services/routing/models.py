"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ...models.domain import Point


@dataclass(slots=True)
class RouteResult:
    zone_id: int
    neighborhood: str
    points: List[Point]
    dropped: int = 0
    cached: bool = False

    def to_payload(self) -> dict:
        return {
            "zone_id": self.zone_id,
            "neighborhood": self.neighborhood,
            "points": [{"id": p.seq, "lat": p.lat, "lng": p.lng} for p in self.points],
            "dropped": self.dropped,
        }

    @classmethod
    def from_payload(cls, payload: dict) -> "RouteResult":
        return cls(
            zone_id=int(payload["zone_id"]),
            neighborhood=str(payload["neighborhood"]),
            points=[
                Point(seq=int(item["id"]), lat=float(item["lat"]), lng=float(item["lng"]))
                for item in payload["points"]
            ],
            dropped=int(payload.get("dropped", 0)),
            cached=True,
        )


@dataclass(slots=True)
class PersonRoute:
    """Route of the zone assigned to a person, looked up by email."""

    email: str
    person_number: str
    zone_id: int
    zone_name: str | None
    route: RouteResult = field(repr=False)
