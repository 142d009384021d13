"""
Database configuration and connection management.

Creates the async MongoDB client and hands out the movies collection.
"""

import logging
from typing import Optional

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from .config import Settings, get_settings
from .domain.entities import TITLE_FIELD

logger = logging.getLogger(__name__)

TITLE_INDEX_NAME = "title_idx"


def sanitize_uri(uri: str) -> str:
    """
    Strip credentials from a connection URI for logging.

    Args:
        uri: MongoDB connection URI

    Returns:
        URI with any userinfo before the host hidden
    """
    scheme, sep, rest = uri.partition("://")
    authority, slash, path = rest.partition("/")
    if "@" not in authority:
        return uri

    host = authority.rsplit("@", 1)[1]
    return f"{scheme}{sep}***@{host}{slash}{path}"


def create_mongo_client(settings: Optional[Settings] = None) -> AsyncMongoClient:
    """
    Create an async MongoDB client from settings.

    The client connects lazily; no I/O happens here.

    Args:
        settings: Settings to use (default: cached settings)

    Returns:
        Async MongoDB client
    """
    settings = settings or get_settings()
    logger.info(f"Using MongoDB: {sanitize_uri(settings.MONGODB_URI)}")

    return AsyncMongoClient(
        settings.MONGODB_URI,
        serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    )


def get_movies_collection(
    client: AsyncMongoClient, settings: Optional[Settings] = None
) -> AsyncCollection:
    """
    Get the movies collection handle.

    Args:
        client: Async MongoDB client
        settings: Settings naming the database and collection

    Returns:
        Async collection holding movie documents
    """
    settings = settings or get_settings()
    return client[settings.MONGODB_DATABASE][settings.MONGODB_COLLECTION]


async def ensure_indexes(collection: AsyncCollection) -> str:
    """
    Create the title lookup index if it does not exist yet.

    The index is not unique; title uniqueness is left to callers.

    Args:
        collection: Movies collection

    Returns:
        Name of the title index
    """
    name = await collection.create_index(
        [(TITLE_FIELD, ASCENDING)], name=TITLE_INDEX_NAME
    )
    logger.info(f"Ensured index {name} on {collection.name}")
    return name


async def ping(client: AsyncMongoClient) -> bool:
    """
    Check database connectivity.

    Returns:
        True if the server answered the ping command
    """
    try:
        await client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.error(f"MongoDB ping failed: {e}")
        return False


async def close_client(client: AsyncMongoClient) -> None:
    """Close the client and its connection pool."""
    await client.close()
    logger.info("MongoDB client closed")
