"""
Custom exceptions for the movies library domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (database driver, transport, etc.).
"""

from typing import Optional


class MoviesLibraryException(Exception):
    """Base exception for all movies library errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MovieValidationException(MoviesLibraryException):
    """Raised when a movie fails validation before being persisted."""

    def __init__(self, title: Optional[str] = None):
        super().__init__(message="Movie is not valid.", details={"title": title})


class InvalidArgumentException(MoviesLibraryException):
    """Raised when a required scalar argument is missing or blank."""

    def __init__(self, argument: str, message: str):
        super().__init__(message=message, details={"argument": argument})
        self.argument = argument


class NotFoundException(MoviesLibraryException):
    """Base for lookups that matched nothing."""


class MovieNotFoundException(NotFoundException):
    """Raised when a movie with the given title does not exist."""

    def __init__(self, title: str):
        super().__init__(
            message=f"Movie with title '{title}' not found.",
            details={"title": title},
        )
        self.title = title


class NoMoviesFoundException(NotFoundException):
    """Raised when a title fragment search yields no movies."""

    def __init__(self, fragment: Optional[str] = None):
        super().__init__(message="No movies found.", details={"fragment": fragment})
        self.fragment = fragment


class RepositoryException(MoviesLibraryException):
    """Raised when the underlying document store fails."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Repository {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )
