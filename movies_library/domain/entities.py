"""
Domain entities for the movies library.

The Movie entity is framework-agnostic; it only knows how to map itself
to and from the document shape stored in the movies collection.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

# Document field names as stored in the collection
TITLE_FIELD = "Title"
DIRECTOR_FIELD = "Director"
YEAR_RELEASED_FIELD = "YearReleased"
GENRE_FIELD = "Genre"
DURATION_FIELD = "Duration"
RATING_FIELD = "Rating"


@dataclass
class Movie:
    """
    A single movie record.

    Every attribute is optional at construction time so that incomplete
    records can be built and then rejected by the validator.

    Attributes:
        title: Movie title, used as the lookup key
        director: Director name
        year_released: Release year
        genre: Genre name
        duration: Running time in minutes
        rating: Rating, expected in the 0-10 range
    """

    title: Optional[str] = None
    director: Optional[str] = None
    year_released: Optional[int] = None
    genre: Optional[str] = None
    duration: Optional[int] = None
    rating: Optional[float] = None

    def to_document(self) -> dict:
        """
        Convert movie to its stored document shape.

        Integral ratings are stored as floats, matching the Rating type.

        Returns:
            Dictionary with the six movie document fields
        """
        rating = self.rating
        if isinstance(rating, int) and not isinstance(rating, bool):
            rating = float(rating)

        return {
            TITLE_FIELD: self.title,
            DIRECTOR_FIELD: self.director,
            YEAR_RELEASED_FIELD: self.year_released,
            GENRE_FIELD: self.genre,
            DURATION_FIELD: self.duration,
            RATING_FIELD: rating,
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Movie":
        """
        Build a movie from a stored document.

        Unknown fields (including ``_id``) are ignored and missing fields
        become None.

        Args:
            document: Raw document from the collection

        Returns:
            Movie entity
        """
        rating = document.get(RATING_FIELD)
        if isinstance(rating, int) and not isinstance(rating, bool):
            rating = float(rating)

        return cls(
            title=document.get(TITLE_FIELD),
            director=document.get(DIRECTOR_FIELD),
            year_released=document.get(YEAR_RELEASED_FIELD),
            genre=document.get(GENRE_FIELD),
            duration=document.get(DURATION_FIELD),
            rating=rating,
        )
