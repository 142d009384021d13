"""
Validation functions for movie records.

These checks are pure: they never touch the database and never raise,
so the repository can call them before any mutation.
"""

import math
import sys
from typing import Any

from .domain.entities import Movie

# Rating range constants
MIN_RATING = 0.0
MAX_RATING = 10.0

# Largest integer a document field can hold (signed 64-bit)
MAX_STORED_INT = 2**63 - 1


def is_blank(value: Any) -> bool:
    """
    Check whether a value is missing or an empty/whitespace-only string.

    Args:
        value: Value to check

    Returns:
        True if value is None, not a string, or only whitespace
    """
    if not isinstance(value, str):
        return True
    return not value.strip()


def _is_positive_int(value: Any) -> bool:
    # bool is a subclass of int but never a valid year or duration
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 < value <= MAX_STORED_INT


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, int):
        # compared exactly, so huge ints never get converted here
        return -sys.float_info.max <= value <= sys.float_info.max
    return False


def is_valid_movie(movie: Any, enforce_rating_range: bool = False) -> bool:
    """
    Validate a movie against field presence and range rules.

    A movie is valid when title, director and genre are non-blank strings,
    year_released and duration are positive integers, and rating is a
    number. The 0-10 rating range is only checked on request.

    Args:
        movie: Movie to validate (anything else is invalid)
        enforce_rating_range: Also reject ratings outside 0-10

    Returns:
        True if the movie is valid, False otherwise
    """
    if not isinstance(movie, Movie):
        return False

    if is_blank(movie.title) or is_blank(movie.director) or is_blank(movie.genre):
        return False

    if not _is_positive_int(movie.year_released):
        return False

    if not _is_positive_int(movie.duration):
        return False

    if not _is_number(movie.rating):
        return False

    if enforce_rating_range and not MIN_RATING <= movie.rating <= MAX_RATING:
        return False

    return True
