"""
Unit tests for domain entities.
"""

from movies_library.domain.entities import Movie


class TestMovie:
    """Tests for the Movie entity."""

    def test_defaults_are_none(self):
        """Test an empty movie can be built."""
        movie = Movie()
        assert movie.title is None
        assert movie.rating is None

    def test_to_document(self, naruto):
        """Test document uses stored field names."""
        assert naruto.to_document() == {
            "Title": "Naruto",
            "Director": "Denis Atanassov",
            "YearReleased": 1992,
            "Genre": "Anime",
            "Duration": 119,
            "Rating": 6.5,
        }

    def test_from_document_ignores_id_and_unknown_fields(self, naruto):
        """Test Mongo id and extra fields are dropped."""
        document = naruto.to_document()
        document["_id"] = "65f0c0ffee"
        document["Studio"] = "Pierrot"

        assert Movie.from_document(document) == naruto

    def test_from_document_missing_fields(self):
        """Test missing fields become None."""
        movie = Movie.from_document({"Title": "Naruto"})
        assert movie.title == "Naruto"
        assert movie.director is None
        assert movie.duration is None

    def test_from_document_integral_rating_becomes_float(self):
        """Test integral ratings come back as floats."""
        movie = Movie.from_document({"Title": "Naruto", "Rating": 10})
        assert movie.rating == 10.0
        assert isinstance(movie.rating, float)

    def test_to_document_integral_rating_stored_as_float(self, naruto):
        """Test integral ratings are written as floats."""
        naruto.rating = 10
        rating = naruto.to_document()["Rating"]
        assert rating == 10.0
        assert isinstance(rating, float)
