"""Supabase client for the relational store."""

import logging

from supabase import create_client, Client

from ..config import Settings

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client | None:
    """Create a Supabase client from settings.

    Returns:
        Supabase Client instance if configured, None otherwise.
        Note: This does not test the connection - actual queries may fail with network errors.
    """
    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured (missing URL or key)")
        return None

    try:
        return create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        return None
