"""Graph store gateway backed by Neo4j.

Bins are ``:Tacho`` nodes keyed by their ``id`` property (the correlation
key), with the location held in a ``point`` property. Every call opens its own
session from the shared driver and closes it before returning.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from neo4j import Driver, ManagedTransaction
from neo4j.exceptions import DriverError, Neo4jError, ServiceUnavailable, SessionExpired

from ..errors import StoreError, StoreUnavailable
from ..models.domain import BinNode, CenterNode, NeighborhoodRow

logger = logging.getLogger(__name__)

STORE = "graph"

CREATE_BIN = """
CREATE (t:Tacho {
    barrio: $barrio,
    direccion: $direccion,
    id: $id,
    location: point({latitude: $latitude, longitude: $longitude}),
    prioridad: $prioridad
})
RETURN elementId(t) AS node_ref
"""

DELETE_BIN = """
MATCH (t:Tacho {id: $id})
DETACH DELETE t
RETURN count(t) AS deleted
"""

BIN_FIELDS = """
RETURN t.id AS id, t.barrio AS barrio, t.direccion AS direccion,
       t.location.latitude AS latitude, t.location.longitude AS longitude,
       t.prioridad AS prioridad, elementId(t) AS node_ref
"""

GET_BIN = "MATCH (t:Tacho {id: $id})" + BIN_FIELDS + "LIMIT 1"

LIST_BINS = "MATCH (t:Tacho)" + BIN_FIELDS

NEIGHBORHOOD_POINTS = """
MATCH (t:Tacho)
WHERE t.barrio = $barrio
RETURN t.id AS id, t.location.latitude AS lat, t.location.longitude AS lng
"""

SET_PRIORITY = """
MATCH (t:Tacho {id: $id})
SET t.prioridad = $prioridad
RETURN count(t) AS updated
"""

GET_CENTER = """
MATCH (c)
WHERE c.id = $id
RETURN c.nombre AS nombre, c.barrio AS barrio, c.direccion AS direccion,
       c.location.latitude AS latitude, c.location.longitude AS longitude
LIMIT 1
"""


def _as_float(value: Any) -> float | None:
    """Numeric values become floats; anything else (including None) is absent."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _bin_node_from_record(record: Any) -> BinNode:
    return BinNode(
        correlation_key=_as_str(record["id"]),
        neighborhood=_as_str(record["barrio"]),
        address=_as_str(record["direccion"]),
        latitude=_as_float(record["latitude"]),
        longitude=_as_float(record["longitude"]),
        priority=_as_int(record["prioridad"]),
        node_ref=_as_str(record["node_ref"]) or None,
    )


class GraphStore:
    def __init__(self, driver: Driver | None, database: str | None = None) -> None:
        self._driver = driver
        self._database = database

    def _run(self, operation: str, work: Callable[[ManagedTransaction], Any], *, write: bool = False) -> Any:
        if self._driver is None:
            raise StoreUnavailable(STORE, operation, "Neo4j is not configured")
        try:
            with self._driver.session(database=self._database) as session:
                if write:
                    return session.execute_write(work)
                return session.execute_read(work)
        except (ServiceUnavailable, SessionExpired) as exc:
            raise StoreUnavailable(STORE, operation, str(exc)) from exc
        except (Neo4jError, DriverError) as exc:
            raise StoreError(STORE, operation, str(exc)) from exc

    def ping(self) -> bool:
        if self._driver is None:
            raise StoreUnavailable(STORE, "ping", "Neo4j is not configured")
        try:
            self._driver.verify_connectivity()
        except (ServiceUnavailable, SessionExpired) as exc:
            raise StoreUnavailable(STORE, "ping", str(exc)) from exc
        except (Neo4jError, DriverError) as exc:
            raise StoreError(STORE, "ping", str(exc)) from exc
        return True

    def create_bin_node(self, node: BinNode) -> str:
        """Create the bin node and return the store's element id for it."""
        params = {
            "barrio": node.neighborhood,
            "direccion": node.address,
            "id": node.correlation_key,
            "latitude": node.latitude,
            "longitude": node.longitude,
            "prioridad": node.priority,
        }

        def work(tx: ManagedTransaction) -> str:
            record = tx.run(CREATE_BIN, params).single()
            if record is None:
                raise StoreError(STORE, "create bin", "no node reference returned")
            return record["node_ref"]

        return self._run("create bin", work, write=True)

    def delete_bin_node(self, correlation_key: str) -> int:
        def work(tx: ManagedTransaction) -> int:
            record = tx.run(DELETE_BIN, {"id": correlation_key}).single()
            return int(record["deleted"]) if record else 0

        return self._run("delete bin", work, write=True)

    def get_bin_node(self, correlation_key: str) -> BinNode | None:
        def work(tx: ManagedTransaction) -> BinNode | None:
            record = tx.run(GET_BIN, {"id": correlation_key}).single()
            return _bin_node_from_record(record) if record else None

        return self._run("get bin", work)

    def list_bin_nodes(self) -> dict[str, BinNode]:
        """Return every bin node keyed by correlation key."""

        def work(tx: ManagedTransaction) -> dict[str, BinNode]:
            nodes = (_bin_node_from_record(record) for record in tx.run(LIST_BINS))
            return {node.correlation_key: node for node in nodes if node.correlation_key}

        return self._run("list bins", work)

    def neighborhood_points(self, neighborhood: str) -> list[NeighborhoodRow]:
        """Return the location of every bin in a neighborhood, in result order.

        Coordinates that are absent or not numeric come back as None; callers
        decide what to do with such rows.
        """

        def work(tx: ManagedTransaction) -> list[NeighborhoodRow]:
            return [
                NeighborhoodRow(
                    correlation_key=_as_str(record["id"]) or None,
                    latitude=_as_float(record["lat"]),
                    longitude=_as_float(record["lng"]),
                )
                for record in tx.run(NEIGHBORHOOD_POINTS, {"barrio": neighborhood})
            ]

        return self._run("neighborhood points", work)

    def set_bin_priority(self, correlation_key: str, priority: int) -> int:
        def work(tx: ManagedTransaction) -> int:
            record = tx.run(SET_PRIORITY, {"id": correlation_key, "prioridad": priority}).single()
            return int(record["updated"]) if record else 0

        return self._run("set priority", work, write=True)

    def get_center_node(self, correlation_key: str) -> CenterNode | None:
        def work(tx: ManagedTransaction) -> CenterNode | None:
            record = tx.run(GET_CENTER, {"id": correlation_key}).single()
            if record is None:
                return None
            return CenterNode(
                name=_as_str(record["nombre"]),
                neighborhood=_as_str(record["barrio"]),
                address=_as_str(record["direccion"]),
                latitude=_as_float(record["latitude"]) or 0.0,
                longitude=_as_float(record["longitude"]) or 0.0,
            )

        return self._run("get center", work)
