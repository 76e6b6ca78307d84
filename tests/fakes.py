"""In-memory stand-ins for the store gateways."""

from __future__ import annotations

from dataclasses import replace

from binservice.models.domain import (
    BinNode,
    BinRecord,
    CenterNode,
    CenterRecord,
    NeighborhoodRow,
    Truck,
    ZoneRecord,
)


class FakeRelational:
    def __init__(self) -> None:
        self.bins: dict[int, BinRecord] = {}
        self.centers: dict[int, CenterRecord] = {}
        self.trucks: dict[int, Truck] = {}
        self.zones: list[ZoneRecord] = []
        self.fail_with: Exception | None = None
        self._next_id = 1

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def ping(self) -> bool:
        self._maybe_fail()
        return True

    def add_bin(self, correlation_key: str, capacity: float = 50.0) -> BinRecord:
        record = BinRecord(
            bin_id=self._next_id,
            type_id=1,
            status_id=1,
            correlation_key=correlation_key,
            capacity=capacity,
        )
        self.bins[record.bin_id] = record
        self._next_id += 1
        return record

    def insert_bin(self, *, type_id: int, status_id: int, correlation_key: str, capacity: float) -> int:
        self._maybe_fail()
        record = self.add_bin(correlation_key, capacity)
        record.type_id = type_id
        record.status_id = status_id
        return record.bin_id

    def delete_bins_matching(self, correlation_key: str) -> int:
        self._maybe_fail()
        matching = [bin_id for bin_id, record in self.bins.items() if correlation_key in record.correlation_key]
        for bin_id in matching:
            del self.bins[bin_id]
        return len(matching)

    def get_bin(self, bin_id: int) -> BinRecord | None:
        self._maybe_fail()
        record = self.bins.get(bin_id)
        return replace(record) if record else None

    def list_bins(self) -> list[BinRecord]:
        self._maybe_fail()
        return [replace(record) for _, record in sorted(self.bins.items())]

    def update_capacity(self, bin_id: int, capacity: float) -> int:
        self._maybe_fail()
        if bin_id not in self.bins:
            return 0
        self.bins[bin_id].capacity = capacity
        return 1

    def list_centers(self) -> list[CenterRecord]:
        self._maybe_fail()
        return [self.centers[key] for key in sorted(self.centers)]

    def get_center(self, center_id: int) -> CenterRecord | None:
        self._maybe_fail()
        return self.centers.get(center_id)

    def list_trucks(self) -> list[Truck]:
        self._maybe_fail()
        return [self.trucks[key] for key in sorted(self.trucks)]

    def get_truck(self, truck_id: int) -> Truck | None:
        self._maybe_fail()
        return self.trucks.get(truck_id)

    def list_operational_trucks(self) -> list[Truck]:
        self._maybe_fail()
        return [truck for truck in self.list_trucks() if truck.status_id == 1]

    def list_zones(self) -> list[ZoneRecord]:
        self._maybe_fail()
        return list(self.zones)


class FakeGraph:
    def __init__(self) -> None:
        self.nodes: dict[str, BinNode] = {}
        self.centers: dict[str, CenterNode] = {}
        self.raw_rows: dict[str, list[NeighborhoodRow]] = {}
        self.fail_with: Exception | None = None
        self.calls = 0
        self._next_ref = 1

    def _maybe_fail(self) -> None:
        self.calls += 1
        if self.fail_with is not None:
            raise self.fail_with

    def ping(self) -> bool:
        self._maybe_fail()
        return True

    def add_node(
        self,
        address: str,
        neighborhood: str,
        latitude: float | None,
        longitude: float | None,
        priority: int = 0,
    ) -> BinNode:
        node = BinNode(
            correlation_key=f"{address}|{neighborhood}",
            neighborhood=neighborhood,
            address=address,
            latitude=latitude,
            longitude=longitude,
            priority=priority,
            node_ref=f"4:graph:{self._next_ref}",
        )
        self._next_ref += 1
        self.nodes[node.correlation_key] = node
        return node

    def create_bin_node(self, node: BinNode) -> str:
        self._maybe_fail()
        stored = replace(node, node_ref=f"4:graph:{self._next_ref}")
        self._next_ref += 1
        self.nodes[node.correlation_key] = stored
        return stored.node_ref

    def delete_bin_node(self, correlation_key: str) -> int:
        self._maybe_fail()
        return 1 if self.nodes.pop(correlation_key, None) else 0

    def get_bin_node(self, correlation_key: str) -> BinNode | None:
        self._maybe_fail()
        return self.nodes.get(correlation_key)

    def list_bin_nodes(self) -> dict[str, BinNode]:
        self._maybe_fail()
        return dict(self.nodes)

    def neighborhood_points(self, neighborhood: str) -> list[NeighborhoodRow]:
        self._maybe_fail()
        if neighborhood in self.raw_rows:
            return list(self.raw_rows[neighborhood])
        return [
            NeighborhoodRow(correlation_key=node.correlation_key, latitude=node.latitude, longitude=node.longitude)
            for node in self.nodes.values()
            if node.neighborhood == neighborhood
        ]

    def set_bin_priority(self, correlation_key: str, priority: int) -> int:
        self._maybe_fail()
        node = self.nodes.get(correlation_key)
        if node is None:
            return 0
        node.priority = priority
        return 1

    def get_center_node(self, correlation_key: str) -> CenterNode | None:
        self._maybe_fail()
        return self.centers.get(correlation_key)


class FakeCache:
    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}
        self.lists: dict[str, list[str]] = {}
        self.hashes: dict[str, dict[str, str]] = {}
        self.fail_with: Exception | None = None

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def ping(self) -> bool:
        self._maybe_fail()
        return True

    def get(self, key: str) -> str | None:
        self._maybe_fail()
        return self.values.get(key)

    def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        self._maybe_fail()
        self.values[key] = value
        self.ttls[key] = ttl_seconds

    def exists(self, key: str) -> bool:
        self._maybe_fail()
        return key in self.values or key in self.lists or key in self.hashes

    def list_push(self, key: str, *values: str) -> int:
        self._maybe_fail()
        items = self.lists.setdefault(key, [])
        for value in values:
            items.insert(0, value)
        return len(items)

    def list_range(self, key: str, start: int = 0, end: int = -1) -> list[str]:
        self._maybe_fail()
        items = self.lists.get(key, [])
        return items[start:] if end == -1 else items[start : end + 1]

    def hash_set(self, key: str, mapping: dict) -> None:
        self._maybe_fail()
        self.hashes.setdefault(key, {}).update({k: str(v) for k, v in mapping.items()})

    def hash_get_all(self, key: str) -> dict[str, str]:
        self._maybe_fail()
        return dict(self.hashes.get(key, {}))
