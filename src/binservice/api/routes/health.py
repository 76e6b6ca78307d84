"""Health endpoints."""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Depends, status

from ...errors import StoreError
from ...persistence.cache import CacheStore
from ...persistence.graph import GraphStore
from ...persistence.relational import RelationalStore
from ..dependencies import get_stores

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _check(ping: Callable[[], bool]) -> dict:
    try:
        return {"healthy": ping()}
    except StoreError as e:
        return {"healthy": False, "error": str(e)}


@router.get("/health/stores", status_code=status.HTTP_200_OK)
def health_stores(
    stores: tuple[RelationalStore, GraphStore, CacheStore] = Depends(get_stores),
) -> dict:
    """Check connectivity of the relational store, graph store and cache."""
    relational, graph, cache = stores
    checks = {
        "relational": _check(relational.ping),
        "graph": _check(graph.ping),
        "cache": _check(cache.ping),
    }
    return {
        "status": "ok" if all(check["healthy"] for check in checks.values()) else "degraded",
        "stores": checks,
    }
