"""
Shared dependencies for the movies library.

Wires settings, the MongoDB client, the repository and the service
together and keeps one instance of each per process.
"""

from typing import TYPE_CHECKING, Optional

from .config import Settings, get_settings
from .database import close_client, create_mongo_client, get_movies_collection
from .repositories.mongo_repository import MongoMovieRepository
from .services.movie_service import MoviesLibraryService

if TYPE_CHECKING:
    from pymongo import AsyncMongoClient

# Global instances (created lazily or set by the host application)
_mongo_client: Optional["AsyncMongoClient"] = None
_movies_service: Optional[MoviesLibraryService] = None


def get_mongo_client(settings: Optional[Settings] = None) -> "AsyncMongoClient":
    """Get the process-wide MongoDB client, creating it on first use."""
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = create_mongo_client(settings)
    return _mongo_client


async def close_mongo_client() -> None:
    """Close the process-wide MongoDB client, if any."""
    global _mongo_client
    if _mongo_client is not None:
        await close_client(_mongo_client)
        _mongo_client = None


def get_movie_repository(settings: Optional[Settings] = None) -> MongoMovieRepository:
    """
    Build a repository over the configured movies collection.

    Args:
        settings: Settings to use (default: cached settings)

    Returns:
        MongoDB movie repository
    """
    settings = settings or get_settings()
    collection = get_movies_collection(get_mongo_client(settings), settings)
    return MongoMovieRepository(
        collection, enforce_rating_range=settings.ENFORCE_RATING_RANGE
    )


def set_movies_service(service: Optional[MoviesLibraryService]) -> None:
    """
    Set the global movies service instance.

    Called by the host application during startup, or by tests.
    """
    global _movies_service
    _movies_service = service


def get_movies_service() -> MoviesLibraryService:
    """Get the movies service, building it from settings on first use."""
    global _movies_service
    if _movies_service is None:
        _movies_service = MoviesLibraryService(get_movie_repository())
    return _movies_service
