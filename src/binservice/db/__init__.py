"""Store client factories."""

from .neo4j import create_neo4j_driver
from .redis import create_redis_client
from .supabase import create_supabase_client

__all__ = ["create_neo4j_driver", "create_redis_client", "create_supabase_client"]
