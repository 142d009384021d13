"""
Tests for the movies library service.
"""

from unittest.mock import AsyncMock

import pytest

from movies_library.domain.exceptions import (
    InvalidArgumentException,
    MovieNotFoundException,
    NoMoviesFoundException,
)
from movies_library.repositories.movie_repository import IMovieRepository
from movies_library.services.movie_service import MoviesLibraryService


@pytest.fixture
def mock_repository():
    """Create mock repository."""
    return AsyncMock(spec=IMovieRepository)


@pytest.fixture
def mocked_service(mock_repository):
    """Create service over the mock repository."""
    return MoviesLibraryService(mock_repository)


class TestServiceInitialization:
    """Test service initialization."""

    def test_initialization(self, mocked_service, mock_repository):
        """Test service keeps the repository."""
        assert mocked_service.repository == mock_repository


class TestDelegation:
    """Test every operation delegates to the repository."""

    @pytest.mark.asyncio
    async def test_add(self, mocked_service, mock_repository, naruto):
        mock_repository.add.return_value = naruto

        assert await mocked_service.add(naruto) == naruto
        mock_repository.add.assert_called_once_with(naruto)

    @pytest.mark.asyncio
    async def test_add_many(self, mocked_service, mock_repository, naruto, sasuke):
        mock_repository.add_many.return_value = 2

        assert await mocked_service.add_many(iter([naruto, sasuke])) == 2
        mock_repository.add_many.assert_called_once_with([naruto, sasuke])

    @pytest.mark.asyncio
    async def test_search_passes_case_flag(
        self, mocked_service, mock_repository, naruto
    ):
        mock_repository.search_by_title_fragment.return_value = [naruto]

        result = await mocked_service.search_by_title_fragment("nar", case_sensitive=False)

        assert result == [naruto]
        mock_repository.search_by_title_fragment.assert_called_once_with(
            "nar", case_sensitive=False
        )

    @pytest.mark.asyncio
    async def test_exceptions_propagate(self, mocked_service, mock_repository):
        """Test domain exceptions reach the caller unchanged."""
        error = MovieNotFoundException("Ghost")
        mock_repository.delete.side_effect = error

        with pytest.raises(MovieNotFoundException) as exc_info:
            await mocked_service.delete("Ghost")

        assert exc_info.value is error


class TestServiceWithStore:
    """Exercise the service end to end over the in-memory store."""

    @pytest.mark.asyncio
    async def test_add_and_list(self, service, naruto, sasuke):
        """Test movies added through the service are listed."""
        await service.add(naruto)
        await service.add(sasuke)

        movies = await service.get_all()

        assert len(movies) == 2
        assert {movie.title for movie in movies} == {"Naruto", "Sasuke"}

    @pytest.mark.asyncio
    async def test_update_then_get(self, service, naruto):
        """Test updated fields are visible through the service."""
        await service.add(naruto)
        naruto.rating = 10.0
        naruto.duration = 220

        assert await service.update(naruto) is True

        result = await service.get_by_title("Naruto")
        assert result.rating == 10.0
        assert result.duration == 220

    @pytest.mark.asyncio
    async def test_delete_and_search(self, service, naruto, sasuke):
        """Test a deleted movie disappears from search."""
        await service.add_many([naruto, sasuke])
        await service.delete("Naruto")

        with pytest.raises(NoMoviesFoundException):
            await service.search_by_title_fragment("Nar")

    @pytest.mark.asyncio
    async def test_delete_empty_title(self, service):
        """Test empty title error surfaces through the service."""
        with pytest.raises(InvalidArgumentException, match="Title cannot be empty."):
            await service.delete("")
