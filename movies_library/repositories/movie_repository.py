"""
Movie repository interface (Abstract Base Class).

Defines the contract for movie persistence and retrieval
independent of the underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..domain.entities import Movie


class IMovieRepository(ABC):
    """
    Abstract repository interface for movie data operations.

    Implementations validate movies before every mutation and raise
    domain exceptions instead of returning error codes.
    """

    @abstractmethod
    async def add(self, movie: Movie) -> Movie:
        """
        Persist a new movie.

        Args:
            movie: Movie entity to insert

        Returns:
            The inserted movie

        Raises:
            MovieValidationException: If the movie is not valid
        """
        pass

    @abstractmethod
    async def add_many(self, movies: Iterable[Movie]) -> int:
        """
        Persist several movies at once.

        Either every movie is valid and all are inserted, or nothing is.

        Args:
            movies: Movie entities to insert

        Returns:
            Number of inserted movies

        Raises:
            MovieValidationException: If any movie is not valid
        """
        pass

    @abstractmethod
    async def delete(self, title: Optional[str]) -> None:
        """
        Delete one movie by title.

        Args:
            title: Exact title of the movie to delete

        Raises:
            InvalidArgumentException: If title is empty
            MovieNotFoundException: If no movie has this title
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Movie]:
        """
        Get every stored movie.

        Returns:
            List of movies, empty if the collection is empty
        """
        pass

    @abstractmethod
    async def get_by_title(self, title: Optional[str]) -> Optional[Movie]:
        """
        Find a movie by exact title.

        Args:
            title: Exact title to look up

        Returns:
            Movie if found, None otherwise
        """
        pass

    @abstractmethod
    async def search_by_title_fragment(
        self, fragment: Optional[str], case_sensitive: bool = True
    ) -> List[Movie]:
        """
        Search movies whose title contains a fragment.

        Args:
            fragment: Substring to look for in titles
            case_sensitive: Match case exactly (default: True)

        Returns:
            Non-empty list of matching movies

        Raises:
            NoMoviesFoundException: If no title contains the fragment
        """
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> bool:
        """
        Replace the stored movie that has the same title.

        Args:
            movie: Movie carrying the full replacement contents

        Returns:
            True if a stored movie was replaced, False if none matched

        Raises:
            MovieValidationException: If the movie is not valid
        """
        pass
