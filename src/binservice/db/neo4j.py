"""Neo4j driver for the graph store."""

import logging

from neo4j import Driver, GraphDatabase

from ..config import Settings

logger = logging.getLogger(__name__)


def create_neo4j_driver(settings: Settings) -> Driver | None:
    """Create the process-wide Neo4j driver.

    The driver owns the connection pool; callers open short-lived sessions from
    it and close it once on shutdown. Returns None when no URI is configured.
    """
    if not settings.neo4j_uri:
        logger.warning("Neo4j URI not configured (BIN_NEO4J_URI)")
        return None

    auth = (settings.neo4j_user, settings.neo4j_password) if settings.neo4j_password else None
    try:
        return GraphDatabase.driver(settings.neo4j_uri, auth=auth)
    except Exception as e:
        logger.error(f"Failed to create Neo4j driver: {e}")
        return None
