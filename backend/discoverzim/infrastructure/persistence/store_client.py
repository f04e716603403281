"""Factory for the Supabase async client shared by all repositories."""

import logging
from supabase import AsyncClient, acreate_client

logger = logging.getLogger(__name__)


async def create_store_client(url: str, key: str) -> AsyncClient:
    """
    Create the data store client.

    Args:
        url: Supabase project URL
        key: Project API key (anon key; row-level security applies server-side)

    Returns:
        Connected AsyncClient
    """
    if not url or not key:
        raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be configured")
    client = await acreate_client(url, key)
    logger.info(f"Data store client created for {url}")
    return client
