"""
MongoDB implementation of the movie repository.

Stores movies as documents in a single collection, keyed by title
for point lookups.
"""

import logging
import re
from typing import Iterable, List, Optional

from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from ..domain.entities import TITLE_FIELD, Movie
from ..domain.exceptions import (
    InvalidArgumentException,
    MovieNotFoundException,
    MovieValidationException,
    NoMoviesFoundException,
    RepositoryException,
)
from ..validators import is_blank, is_valid_movie
from .movie_repository import IMovieRepository

logger = logging.getLogger(__name__)

# Never hand Mongo's internal id back to callers
MOVIE_PROJECTION = {"_id": 0}


class MongoMovieRepository(IMovieRepository):
    """MongoDB implementation for movie persistence."""

    def __init__(
        self, collection: AsyncCollection, enforce_rating_range: bool = False
    ):
        """
        Initialize repository.

        Args:
            collection: Async MongoDB collection holding movie documents
            enforce_rating_range: Reject ratings outside 0-10 on add/update
        """
        self.collection = collection
        self.enforce_rating_range = enforce_rating_range

    def _ensure_valid(self, movie: Movie) -> None:
        if not is_valid_movie(movie, enforce_rating_range=self.enforce_rating_range):
            title = getattr(movie, "title", None)
            logger.info(f"Rejected invalid movie: {title!r}")
            raise MovieValidationException(title)

    async def add(self, movie: Movie) -> Movie:
        """Insert a movie after validating it."""
        self._ensure_valid(movie)

        try:
            await self.collection.insert_one(movie.to_document())
        except PyMongoError as e:
            logger.error(f"Error adding movie to MongoDB: {e}")
            raise RepositoryException("add", str(e)) from e

        logger.info(f"Added movie: {movie.title}")
        return movie

    async def add_many(self, movies: Iterable[Movie]) -> int:
        """Insert several movies; nothing is written if any is invalid."""
        movies = list(movies)
        for movie in movies:
            self._ensure_valid(movie)

        if not movies:
            return 0

        try:
            result = await self.collection.insert_many(
                [movie.to_document() for movie in movies]
            )
        except PyMongoError as e:
            logger.error(f"Error adding movies to MongoDB: {e}")
            raise RepositoryException("add_many", str(e)) from e

        inserted = len(result.inserted_ids)
        logger.info(f"Added {inserted} movies")
        return inserted

    async def delete(self, title: Optional[str]) -> None:
        """Delete exactly one movie with the given title."""
        if is_blank(title):
            raise InvalidArgumentException("title", "Title cannot be empty.")

        try:
            result = await self.collection.delete_one({TITLE_FIELD: title})
        except PyMongoError as e:
            logger.error(f"Error deleting movie from MongoDB: {e}")
            raise RepositoryException("delete", str(e)) from e

        if result.deleted_count == 0:
            raise MovieNotFoundException(title)

        logger.info(f"Deleted movie: {title}")

    async def get_all(self) -> List[Movie]:
        """Return every movie in the collection."""
        try:
            cursor = self.collection.find({}, MOVIE_PROJECTION)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error listing movies from MongoDB: {e}")
            raise RepositoryException("get_all", str(e)) from e

        return [Movie.from_document(doc) for doc in documents]

    async def get_by_title(self, title: Optional[str]) -> Optional[Movie]:
        """Find a movie by exact title, or None."""
        # a non-string title would be read as a query operator
        if not isinstance(title, str):
            return None

        try:
            document = await self.collection.find_one(
                {TITLE_FIELD: title}, MOVIE_PROJECTION
            )
        except PyMongoError as e:
            logger.error(f"Error finding movie in MongoDB: {e}")
            raise RepositoryException("get_by_title", str(e)) from e

        if document is None:
            logger.debug(f"Movie not found: {title}")
            return None

        return Movie.from_document(document)

    async def search_by_title_fragment(
        self, fragment: Optional[str], case_sensitive: bool = True
    ) -> List[Movie]:
        """Find movies whose title contains the fragment as a literal substring."""
        if fragment is None:
            raise InvalidArgumentException(
                "fragment", "Title fragment cannot be empty."
            )
        if not isinstance(fragment, str):
            raise InvalidArgumentException("fragment", "Title fragment must be text.")

        query = {TITLE_FIELD: self._build_fragment_filter(fragment, case_sensitive)}

        try:
            cursor = self.collection.find(query, MOVIE_PROJECTION)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error searching movies in MongoDB: {e}")
            raise RepositoryException("search_by_title_fragment", str(e)) from e

        if not documents:
            raise NoMoviesFoundException(fragment)

        logger.debug(f"Fragment {fragment!r} matched {len(documents)} movies")
        return [Movie.from_document(doc) for doc in documents]

    async def update(self, movie: Movie) -> bool:
        """Replace the stored movie that has the same title."""
        self._ensure_valid(movie)

        try:
            result = await self.collection.replace_one(
                {TITLE_FIELD: movie.title}, movie.to_document(), upsert=False
            )
        except PyMongoError as e:
            logger.error(f"Error updating movie in MongoDB: {e}")
            raise RepositoryException("update", str(e)) from e

        if result.matched_count == 0:
            logger.warning(f"Update matched no movie titled {movie.title!r}")
            return False

        logger.info(f"Updated movie: {movie.title}")
        return True

    @staticmethod
    def _build_fragment_filter(fragment: str, case_sensitive: bool) -> dict:
        """
        Build a regex filter matching titles that contain the fragment.

        Args:
            fragment: Literal substring to look for
            case_sensitive: Match case exactly

        Returns:
            MongoDB $regex filter
        """
        regex_filter = {"$regex": re.escape(fragment)}
        if not case_sensitive:
            regex_filter["$options"] = "i"
        return regex_filter
