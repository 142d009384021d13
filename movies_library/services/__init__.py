"""
Service layer - Operations exposed to callers.
"""

from .movie_service import MoviesLibraryService

__all__ = ["MoviesLibraryService"]
