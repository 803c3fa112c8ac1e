"""
Unit tests for media type negotiation.

Why: The Accept header selects both the API version and any preview feature,
     so a wrong value silently changes response shapes.

What: Tests Accept resolution for the stable representation and previews.

How: Resolves MediaType values directly.
"""

import pytest

from src.hubcaps.media import MediaType


class TestMediaType:
    """Test Accept header resolution."""

    def test_json_accept(self) -> None:
        assert MediaType.JSON.accept() == "application/vnd.github.v3+json"
        assert not MediaType.JSON.is_preview

    def test_preview_accept(self) -> None:
        media_type = MediaType.preview("antiope")
        assert media_type.accept() == "application/vnd.github.antiope-preview+json"
        assert media_type.is_preview

    def test_custom_product_and_version(self) -> None:
        assert (
            MediaType.JSON.accept("example", "v4") == "application/vnd.example.v4+json"
        )
        assert (
            MediaType.preview("machine-man").accept("example", "v4")
            == "application/vnd.example.machine-man-preview+json"
        )

    def test_str_is_accept_value(self) -> None:
        assert str(MediaType.preview("antiope")) == (
            "application/vnd.github.antiope-preview+json"
        )

    def test_empty_preview_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            MediaType.preview("")

    def test_equality(self) -> None:
        assert MediaType.preview("antiope") == MediaType.preview("antiope")
        assert MediaType() == MediaType.JSON
