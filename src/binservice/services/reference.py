"""Reads of reference entities: collection centers and trucks."""

from __future__ import annotations

import logging

from ..errors import NotFound, StoreError
from ..models.domain import Center, CenterRecord, Truck
from ..persistence.graph import GraphStore
from ..persistence.relational import RelationalStore

logger = logging.getLogger(__name__)


class ReferenceService:
    def __init__(self, relational: RelationalStore, graph: GraphStore) -> None:
        self._relational = relational
        self._graph = graph

    def _enrich(self, record: CenterRecord) -> Center:
        """Add the graph node's display attributes to a center row.

        Rows without a correlation key skip the graph lookup; a failed or empty
        lookup leaves the display fields at their defaults.
        """
        center = Center(
            center_id=record.center_id,
            type_name=record.type_name,
            correlation_key=record.correlation_key,
        )
        if not record.correlation_key:
            return center
        try:
            node = self._graph.get_center_node(record.correlation_key)
        except StoreError as exc:
            logger.warning(f"Graph lookup failed for center {record.center_id} ('{record.correlation_key}'): {exc}")
            return center
        if node is None:
            logger.warning(f"Center {record.center_id} has no graph node for '{record.correlation_key}'")
            return center
        center.name = node.name
        center.neighborhood = node.neighborhood
        center.address = node.address
        center.latitude = node.latitude
        center.longitude = node.longitude
        return center

    def list_centers(self) -> list[Center]:
        return [self._enrich(record) for record in self._relational.list_centers()]

    def get_center(self, center_id: int) -> Center:
        record = self._relational.get_center(center_id)
        if record is None:
            raise NotFound(f"Center {center_id} not found.")
        return self._enrich(record)

    def list_trucks(self) -> list[Truck]:
        return self._relational.list_trucks()

    def get_truck(self, truck_id: int) -> Truck:
        truck = self._relational.get_truck(truck_id)
        if truck is None:
            raise NotFound(f"Truck {truck_id} not found.")
        return truck
