"""Domain models for bins, centers, trucks and people."""

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class BinRecord:
    """Operational row of a bin as stored in the relational store."""

    bin_id: int
    type_id: int
    status_id: int
    correlation_key: str
    capacity: float


@dataclass(slots=True)
class BinNode:
    """Spatial node of a bin as stored in the graph store.

    ``latitude``/``longitude`` are None when the node's location is absent or
    not numeric.
    """

    correlation_key: str
    neighborhood: str
    address: str
    latitude: Optional[float]
    longitude: Optional[float]
    priority: Optional[int] = None
    node_ref: Optional[str] = None


@dataclass(slots=True)
class Bin:
    """A bin joined across both stores."""

    bin_id: int
    type_id: int
    status_id: int
    capacity: float
    correlation_key: str
    neighborhood: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    priority: Optional[int] = None


@dataclass(slots=True)
class NeighborhoodRow:
    """One graph row of the zone point query, before coordinate filtering."""

    correlation_key: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]


@dataclass(slots=True)
class Point:
    seq: int
    lat: float
    lng: float


@dataclass(slots=True)
class CenterRecord:
    center_id: int
    type_name: Optional[str]
    correlation_key: Optional[str]


@dataclass(slots=True)
class CenterNode:
    name: str = ""
    neighborhood: str = ""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(slots=True)
class Center:
    center_id: int
    type_name: Optional[str]
    correlation_key: Optional[str]
    name: str = ""
    neighborhood: str = ""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(slots=True)
class Truck:
    truck_id: int
    type_id: Optional[int]
    type_name: Optional[str]
    status_id: Optional[int]
    status_name: Optional[str]


@dataclass(slots=True)
class ZoneRecord:
    zone_id: int
    name: str


@dataclass(slots=True)
class Person:
    id: str
    zone_id: str
    truck_id: str
    zone_name: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
