"""
Repository layer - Data access abstractions.

This layer provides interfaces for movie persistence and retrieval,
hiding the document store from the business logic.
"""

from .mongo_repository import MongoMovieRepository
from .movie_repository import IMovieRepository

__all__ = ["IMovieRepository", "MongoMovieRepository"]
