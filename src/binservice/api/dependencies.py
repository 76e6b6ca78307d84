"""Request-scoped access to the services built at startup."""

from __future__ import annotations

from fastapi import Request

from ..persistence.cache import CacheStore
from ..persistence.graph import GraphStore
from ..persistence.relational import RelationalStore
from ..services.bins.coordinator import BinCoordinator
from ..services.people import PeopleService
from ..services.reference import ReferenceService
from ..services.routing.planner import ZoneRoutePlanner


def get_coordinator(request: Request) -> BinCoordinator:
    return request.app.state.coordinator


def get_planner(request: Request) -> ZoneRoutePlanner:
    return request.app.state.planner


def get_reference_service(request: Request) -> ReferenceService:
    return request.app.state.reference


def get_people_service(request: Request) -> PeopleService:
    return request.app.state.people


def get_stores(request: Request) -> tuple[RelationalStore, GraphStore, CacheStore]:
    state = request.app.state
    return state.relational, state.graph, state.cache
