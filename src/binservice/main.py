"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import AsyncGenerator, Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import bins, centers, emergencies, health, people, routes, trucks
from .config import Settings, settings
from .db import create_neo4j_driver, create_redis_client, create_supabase_client
from .errors import StoreError
from .persistence.cache import CacheStore
from .persistence.graph import GraphStore
from .persistence.relational import RelationalStore
from .services.bins.coordinator import BinCoordinator
from .services.people import PeopleService
from .services.reference import ReferenceService
from .services.routing.planner import ZoneRoutePlanner

logger = logging.getLogger(__name__)


def install_services(
    app: FastAPI,
    *,
    relational: RelationalStore,
    graph: GraphStore,
    cache: CacheStore,
    config: Settings = settings,
) -> None:
    """Build the services on top of the given gateways and attach them to the app."""
    planner = ZoneRoutePlanner(graph, cache, cache_ttl_seconds=config.route_cache_ttl_seconds)
    app.state.relational = relational
    app.state.graph = graph
    app.state.cache = cache
    app.state.coordinator = BinCoordinator(relational, graph)
    app.state.planner = planner
    app.state.reference = ReferenceService(relational, graph)
    app.state.people = PeopleService(cache, planner)


def _seed_people(app: FastAPI, *, seed_roster: bool = True) -> None:
    """Seed the staff roster and load the demo email lookups, best-effort.

    The two steps fail independently; the email lookups only need the cache.
    """
    people_service: PeopleService = app.state.people
    if seed_roster:
        try:
            people_service.seed_people(app.state.relational, max_people=settings.max_seeded_people)
        except StoreError as e:
            logger.warning(f"People seeding skipped: {e}")
    try:
        people_service.load_demo_users()
    except StoreError as e:
        logger.warning(f"Demo users not loaded: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Own the store clients for the lifetime of the process."""
    driver = create_neo4j_driver(settings)
    redis_client = create_redis_client(settings)
    install_services(
        app,
        relational=RelationalStore(create_supabase_client(settings)),
        graph=GraphStore(driver, database=settings.neo4j_database),
        cache=CacheStore(redis_client),
    )
    _seed_people(app, seed_roster=settings.seed_people_on_startup)

    try:
        yield
    finally:
        logger.info("Closing store clients")
        if driver is not None:
            driver.close()
        redis_client.close()


def create_app(app_lifespan: Callable[[FastAPI], AbstractAsyncContextManager[None]] = lifespan) -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title=settings.app_name, lifespan=app_lifespan)
    if settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "api_prefix": settings.api_prefix,
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(bins.router, prefix=settings.api_prefix)
    app.include_router(routes.router, prefix=settings.api_prefix)
    app.include_router(centers.router, prefix=settings.api_prefix)
    app.include_router(trucks.router, prefix=settings.api_prefix)
    app.include_router(people.router, prefix=settings.api_prefix)
    app.include_router(emergencies.router, prefix=settings.api_prefix)
    return app


app = create_app()
