import pytest

from binservice.services.bins.coordinator import BinCoordinator
from binservice.services.routing.planner import ZoneRoutePlanner
from fakes import FakeCache, FakeGraph, FakeRelational


@pytest.fixture
def relational() -> FakeRelational:
    return FakeRelational()


@pytest.fixture
def graph() -> FakeGraph:
    return FakeGraph()


@pytest.fixture
def cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
def coordinator(relational: FakeRelational, graph: FakeGraph) -> BinCoordinator:
    return BinCoordinator(relational, graph)


@pytest.fixture
def planner(graph: FakeGraph, cache: FakeCache) -> ZoneRoutePlanner:
    return ZoneRoutePlanner(graph, cache, cache_ttl_seconds=60)
