"""Fixed mapping from caller-facing zone ids to neighborhood names."""

from __future__ import annotations

from ...errors import UnknownZone

ZONE_NEIGHBORHOODS: dict[int, str] = {
    1: "CHACARITA",
    2: "MONTE CASTRO",
    3: "BOEDO",
    4: "VILLA CRESPO",
}


def neighborhood_for_zone(zone_id: int) -> str:
    try:
        return ZONE_NEIGHBORHOODS[zone_id]
    except KeyError:
        raise UnknownZone(zone_id) from None
