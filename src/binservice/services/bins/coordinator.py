"""Bin lifecycle across the relational and graph stores.

The two stores are linked only by the correlation key (``address|neighborhood``).
Writes are not atomic across stores:

* create writes the graph node first and the relational row second. If the
  relational write fails the node stays behind and ``PartialWriteFailure`` is
  raised so it can be reconciled by hand.
* delete attempts both stores independently and succeeds when either one
  removed something.
"""

from __future__ import annotations

import logging
from typing import Callable

from ...errors import NotFound, PartialWriteFailure, StoreError, StoreUnavailable
from ...models.domain import Bin, BinNode, BinRecord
from ...persistence.graph import GraphStore
from ...persistence.relational import RelationalStore
from ...schemas.bins import CreateBinRequest
from ..correlation import derive_key
from .models import BinCreated, BinDeleted

logger = logging.getLogger(__name__)

MIN_CAPACITY = 0.0
MAX_CAPACITY = 100.0


def _join(record: BinRecord, node: BinNode | None) -> Bin:
    joined = Bin(
        bin_id=record.bin_id,
        type_id=record.type_id,
        status_id=record.status_id,
        capacity=record.capacity,
        correlation_key=record.correlation_key,
    )
    if node is not None:
        joined.neighborhood = node.neighborhood
        joined.address = node.address
        joined.latitude = node.latitude
        joined.longitude = node.longitude
        joined.priority = node.priority
    return joined


def validate_capacity(capacity: float) -> None:
    if capacity < MIN_CAPACITY or capacity > MAX_CAPACITY:
        raise ValueError(f"Capacity {capacity} is out of range [{MIN_CAPACITY:g}, {MAX_CAPACITY:g}].")


class BinCoordinator:
    def __init__(self, relational: RelationalStore, graph: GraphStore) -> None:
        self._relational = relational
        self._graph = graph

    def create(self, payload: CreateBinRequest) -> BinCreated:
        validate_capacity(payload.capacidad)
        key = derive_key(payload.direccion, payload.barrio)

        node_ref = self._graph.create_bin_node(
            BinNode(
                correlation_key=key,
                neighborhood=payload.barrio,
                address=payload.direccion,
                latitude=payload.latitude,
                longitude=payload.longitude,
                priority=payload.prioridad,
            )
        )

        try:
            bin_id = self._relational.insert_bin(
                type_id=payload.id_tipo,
                status_id=payload.id_estado,
                correlation_key=key,
                capacity=payload.capacidad,
            )
        except StoreError as exc:
            logger.error(
                f"Bin '{key}' written to graph store (node {node_ref}) but not to relational store: {exc}"
            )
            raise PartialWriteFailure(key, node_ref, str(exc)) from exc

        logger.info(f"Created bin {bin_id} ('{key}', node {node_ref})")
        return BinCreated(bin_id=bin_id, graph_node_ref=node_ref, correlation_key=key)

    def delete(self, correlation_key: str) -> BinDeleted:
        """Delete the bin from both stores.

        Raises:
            NotFound: neither store had the key.
            StoreUnavailable: nothing was deleted and at least one store was
                unreachable.
        """
        relational_deleted, relational_error = self._attempt_delete(
            self._relational.delete_bins_matching, correlation_key
        )
        graph_deleted, graph_error = self._attempt_delete(self._graph.delete_bin_node, correlation_key)

        if not relational_deleted and not graph_deleted:
            errors = [err for err in (relational_error, graph_error) if err is not None]
            for error in errors:
                if isinstance(error, StoreUnavailable):
                    raise error
            detail = "; ".join(str(err) for err in errors) or "no matching record in either store"
            raise NotFound(f"Bin '{correlation_key}' could not be deleted from any store: {detail}")

        result = BinDeleted(
            correlation_key=correlation_key,
            relational_deleted=relational_deleted,
            graph_deleted=graph_deleted,
        )
        if not relational_deleted:
            result.warnings.append(f"relational: {relational_error or 'no matching row'}")
        if not graph_deleted:
            result.warnings.append(f"graph: {graph_error or 'no matching node'}")
        for warning in result.warnings:
            logger.warning(f"Partial delete of bin '{correlation_key}': {warning}")
        return result

    @staticmethod
    def _attempt_delete(delete: Callable[[str], int], key: str) -> tuple[int, StoreError | None]:
        try:
            return delete(key), None
        except StoreError as exc:
            return 0, exc

    def update_capacity(self, bin_id: int, capacity: float) -> float:
        validate_capacity(capacity)
        if self._relational.update_capacity(bin_id, capacity) == 0:
            raise NotFound(f"Bin {bin_id} not found.")
        return capacity

    def update_priority(self, bin_id: int, priority: int) -> BinRecord:
        """Set the priority on the bin's graph node. No range is enforced."""
        record = self._relational.get_bin(bin_id)
        if record is None:
            raise NotFound(f"Bin {bin_id} not found.")
        if self._graph.set_bin_priority(record.correlation_key, priority) == 0:
            raise NotFound(f"Bin {bin_id} has no graph node for '{record.correlation_key}'.")
        return record

    def list_bins(self) -> list[Bin]:
        records = self._relational.list_bins()
        try:
            nodes = self._graph.list_bin_nodes()
        except StoreError as exc:
            logger.warning(f"Graph lookup failed while listing bins, spatial fields left empty: {exc}")
            nodes = {}
        return [_join(record, nodes.get(record.correlation_key)) for record in records]

    def get_bin(self, bin_id: int) -> Bin:
        record = self._relational.get_bin(bin_id)
        if record is None:
            raise NotFound(f"Bin {bin_id} not found.")
        node = None
        if record.correlation_key:
            try:
                node = self._graph.get_bin_node(record.correlation_key)
            except StoreError as exc:
                logger.warning(f"Graph lookup failed for bin {bin_id} ('{record.correlation_key}'): {exc}")
        return _join(record, node)
