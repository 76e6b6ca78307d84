"""Zone route ordering.

Fetches every bin of a zone's neighborhood from the graph store and orders
them by great-circle distance from the first one returned. This is a
nearest-to-reference ordering, not a tour optimization.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, Sequence

from ...errors import StoreError
from ...models.domain import NeighborhoodRow, Point
from ...persistence.cache import CacheStore
from ...persistence.graph import GraphStore
from ..geospatial import haversine_km
from .models import RouteResult
from .zones import neighborhood_for_zone

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 300


def route_cache_key(zone_id: int) -> str:
    return f"ruta:zona:{zone_id}"


def points_from_rows(rows: Iterable[NeighborhoodRow]) -> tuple[list[Point], int]:
    """Number the rows that carry both coordinates; count the rest as dropped."""
    points: list[Point] = []
    dropped = 0
    for row in rows:
        if row.latitude is None or row.longitude is None:
            dropped += 1
            continue
        points.append(Point(seq=len(points) + 1, lat=row.latitude, lng=row.longitude))
    return points, dropped


def order_by_distance(points: Sequence[Point]) -> list[Point]:
    """Keep the first point first and sort the rest by distance from it.

    The sort is stable, so points at equal distance keep their input order.
    """
    if len(points) <= 1:
        return list(points)
    reference = points[0]
    rest = sorted(
        points[1:],
        key=lambda point: haversine_km(reference.lat, reference.lng, point.lat, point.lng),
    )
    return [reference, *rest]


class ZoneRoutePlanner:
    def __init__(
        self,
        graph: GraphStore,
        cache: CacheStore | None = None,
        *,
        cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
    ) -> None:
        self._graph = graph
        self._cache = cache
        self._cache_ttl_seconds = cache_ttl_seconds

    def get_ordered_points(self, zone_id: int) -> RouteResult:
        """Return the zone's bins ordered by distance from the first one.

        Raises:
            UnknownZone: ``zone_id`` is not in the zone table.
            StoreError: the graph store query failed.
        """
        neighborhood = neighborhood_for_zone(zone_id)

        cached = self._read_cache(zone_id)
        if cached is not None:
            return cached

        rows = self._graph.neighborhood_points(neighborhood)
        points, dropped = points_from_rows(rows)
        if dropped:
            logger.warning(
                f"Dropped {dropped} bin(s) without numeric coordinates in zone {zone_id} ({neighborhood})"
            )

        result = RouteResult(
            zone_id=zone_id,
            neighborhood=neighborhood,
            points=order_by_distance(points),
            dropped=dropped,
        )
        self._write_cache(result)
        return result

    def _read_cache(self, zone_id: int) -> RouteResult | None:
        if self._cache is None:
            return None
        try:
            payload = self._cache.get(route_cache_key(zone_id))
            if payload is None:
                return None
            return RouteResult.from_payload(json.loads(payload))
        except StoreError as exc:
            logger.warning(f"Route cache read failed for zone {zone_id}: {exc}")
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning(f"Ignoring undecodable cached route for zone {zone_id}: {exc}")
        return None

    def _write_cache(self, result: RouteResult) -> None:
        if self._cache is None:
            return
        try:
            self._cache.set(
                route_cache_key(result.zone_id),
                json.dumps(result.to_payload()),
                ttl_seconds=self._cache_ttl_seconds,
            )
        except StoreError as exc:
            logger.warning(f"Route cache write failed for zone {result.zone_id}: {exc}")
