"""
Test configuration and fixtures
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from mongomock_motor import AsyncMongoMockClient

from movies_library.domain.entities import Movie
from movies_library.repositories.mongo_repository import MongoMovieRepository
from movies_library.services.movie_service import MoviesLibraryService


@pytest.fixture
def naruto():
    """Sample movie used across tests"""
    return Movie(
        title="Naruto",
        director="Denis Atanassov",
        year_released=1992,
        genre="Anime",
        duration=119,
        rating=6.5,
    )


@pytest.fixture
def sasuke():
    """Second sample movie with a distinct title"""
    return Movie(
        title="Sasuke",
        director="Denis Atanassov",
        year_released=1994,
        genre="Anime",
        duration=90,
        rating=8.5,
    )


@pytest.fixture(scope="function")
def movies_collection():
    """Create a fresh in-memory movies collection for each test"""
    client = AsyncMongoMockClient()
    return client[f"MoviesLibraryTestDb_{uuid4().hex}"]["movies"]


@pytest.fixture
def repository(movies_collection):
    """Repository backed by the in-memory collection"""
    return MongoMovieRepository(movies_collection)


@pytest.fixture
def service(repository):
    """Service wired to the in-memory repository"""
    return MoviesLibraryService(repository)


@pytest.fixture
def mock_collection():
    """Mock async collection for driver-level unit tests"""
    collection = MagicMock()
    collection.name = "movies"
    collection.insert_one = AsyncMock()
    collection.insert_many = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.delete_one = AsyncMock()
    collection.replace_one = AsyncMock()
    collection.create_index = AsyncMock(return_value="title_idx")

    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    return collection
