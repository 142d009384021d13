"""
Domain layer - Core business entities and domain errors.

This layer contains the movie entity and the exceptions raised by the
library, independent of any infrastructure or driver concerns.
"""

from .entities import Movie
from .exceptions import (
    InvalidArgumentException,
    MovieNotFoundException,
    MoviesLibraryException,
    MovieValidationException,
    NoMoviesFoundException,
    NotFoundException,
    RepositoryException,
)

__all__ = [
    "Movie",
    "MoviesLibraryException",
    "MovieValidationException",
    "InvalidArgumentException",
    "NotFoundException",
    "MovieNotFoundException",
    "NoMoviesFoundException",
    "RepositoryException",
]
