"""
Movies library - validation and MongoDB repository for movie records.
"""

from .domain.entities import Movie
from .repositories.mongo_repository import MongoMovieRepository
from .services.movie_service import MoviesLibraryService
from .validators import is_valid_movie

__version__ = "1.0.0"

__all__ = ["Movie", "MongoMovieRepository", "MoviesLibraryService", "is_valid_movie"]
