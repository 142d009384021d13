"""
Movies library service layer.

Thin facade in front of the movie repository. It carries no decision
logic of its own; every domain exception from the repository propagates
unchanged to the caller.
"""

from typing import Iterable, List, Optional

from ..domain.entities import Movie
from ..logging_config import get_logger
from ..repositories.movie_repository import IMovieRepository

logger = get_logger(__name__)


class MoviesLibraryService:
    """Movie operations exposed to presentation layers."""

    def __init__(self, repository: IMovieRepository):
        """
        Initialize service.

        Args:
            repository: Movie repository to delegate to
        """
        self.repository = repository

    async def add(self, movie: Movie) -> Movie:
        """Add a movie; raises MovieValidationException if it is invalid."""
        logger.debug("add_movie", title=getattr(movie, "title", None))
        return await self.repository.add(movie)

    async def add_many(self, movies: Iterable[Movie]) -> int:
        """Add several movies; nothing is added if any is invalid."""
        movies = list(movies)
        logger.debug("add_movies", count=len(movies))
        return await self.repository.add_many(movies)

    async def delete(self, title: Optional[str]) -> None:
        """Delete one movie by title; raises if blank or not found."""
        logger.debug("delete_movie", title=title)
        await self.repository.delete(title)

    async def get_all(self) -> List[Movie]:
        """Return every stored movie (empty list if none)."""
        movies = await self.repository.get_all()
        logger.debug("get_all_movies", count=len(movies))
        return movies

    async def get_by_title(self, title: Optional[str]) -> Optional[Movie]:
        """Return the movie with this exact title, or None."""
        movie = await self.repository.get_by_title(title)
        logger.debug("get_movie_by_title", title=title, found=movie is not None)
        return movie

    async def search_by_title_fragment(
        self, fragment: Optional[str], case_sensitive: bool = True
    ) -> List[Movie]:
        """
        Search movies by title fragment.

        Args:
            fragment: Substring to look for in titles
            case_sensitive: Match case exactly (default: True)

        Returns:
            Non-empty list of matching movies

        Raises:
            NoMoviesFoundException: If no title contains the fragment
        """
        logger.debug(
            "search_movies", fragment=fragment, case_sensitive=case_sensitive
        )
        return await self.repository.search_by_title_fragment(
            fragment, case_sensitive=case_sensitive
        )

    async def update(self, movie: Movie) -> bool:
        """Replace the movie with the same title; False if none matched."""
        updated = await self.repository.update(movie)
        logger.debug(
            "update_movie", title=getattr(movie, "title", None), matched=updated
        )
        return updated
