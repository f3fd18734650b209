"""Test fixtures and configuration."""

from collections.abc import Sequence

import pytest
from tunebridge.exceptions import CatalogSearchError
from tunebridge.models.enums import SourceType
from tunebridge.models.track import CatalogResult, Track, TrackDescriptor


def make_result(
    source_id: str,
    title: str,
    artist: str,
    duration_ms: int = 240_000,
    source_type: SourceType = SourceType.YOUTUBE,
) -> CatalogResult:
    """Create a catalog result with an id derived from the source id."""
    return CatalogResult(
        id=f"{source_type.value[:2]}_{source_id}",
        title=title,
        artist=artist,
        duration_ms=duration_ms,
        source_type=source_type,
        source_id=source_id,
    )


def make_track(
    source_id: str,
    title: str,
    artist: str,
    duration_ms: int = 240_000,
    source_type: SourceType = SourceType.YOUTUBE,
    genre: str | None = None,
) -> Track:
    """Create a library track with the same id scheme as make_result()."""
    return Track(
        id=f"{source_type.value[:2]}_{source_id}",
        title=title,
        artist=artist,
        duration_ms=duration_ms,
        source_type=source_type,
        source_id=source_id,
        genre=genre,
    )


class MockCatalog:
    """Mock catalog for testing.

    Results are looked up by query, artist or seed source id; unknown keys
    return ``default_results``. Keys listed in ``failing`` raise
    CatalogSearchError. Every call is recorded.
    """

    def __init__(
        self,
        search_results: dict[str, list[CatalogResult]] | None = None,
        artist_results: dict[str, list[CatalogResult]] | None = None,
        related_results: dict[str, list[CatalogResult]] | None = None,
        default_results: list[CatalogResult] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self._search_results = search_results or {}
        self._artist_results = artist_results or {}
        self._related_results = related_results or {}
        self._default_results = default_results or []
        self._failing = failing or set()
        self.search_calls: list[tuple[str, list[SourceType]]] = []
        self.search_by_artist_calls: list[tuple[str, list[SourceType]]] = []
        self.related_calls: list[tuple[SourceType, str, int]] = []

    @property
    def call_count(self) -> int:
        return (
            len(self.search_calls)
            + len(self.search_by_artist_calls)
            + len(self.related_calls)
        )

    def search(
        self, query: str, source_types: Sequence[SourceType]
    ) -> list[CatalogResult]:
        """Mock search."""
        self.search_calls.append((query, list(source_types)))
        self._maybe_fail(query)
        return list(self._search_results.get(query, self._default_results))

    def search_by_artist(
        self, artist: str, source_types: Sequence[SourceType]
    ) -> list[CatalogResult]:
        """Mock search_by_artist."""
        self.search_by_artist_calls.append((artist, list(source_types)))
        self._maybe_fail(artist)
        return list(self._artist_results.get(artist, self._default_results))

    def related(
        self, source_type: SourceType, source_id: str, count: int
    ) -> list[CatalogResult]:
        """Mock related."""
        self.related_calls.append((source_type, source_id, count))
        self._maybe_fail(source_id)
        return list(self._related_results.get(source_id, self._default_results))[
            :count
        ]

    def _maybe_fail(self, key: str) -> None:
        if key in self._failing:
            raise CatalogSearchError(f"Catalog unavailable for {key}")


@pytest.fixture
def bohemian() -> TrackDescriptor:
    """Create a sample imported track."""
    return TrackDescriptor(
        name="Bohemian Rhapsody",
        artist="Queen",
        album="A Night at the Opera",
        duration_ms=354_000,
    )


@pytest.fixture
def bohemian_result() -> CatalogResult:
    """Create a decorated catalog result for the sample imported track."""
    return make_result(
        "fJ9rUzIMcZQ",
        "Bohemian Rhapsody (Official Video)",
        "Queen",
        duration_ms=356_000,
    )


@pytest.fixture
def library_songs() -> list[Track]:
    """Create a small library of known songs."""
    return [
        make_track("a1", "Paranoid Android", "Radiohead", duration_ms=380_000),
        make_track("a2", "Karma Police", "Radiohead", duration_ms=260_000),
        make_track("m1", "Hysteria", "Muse", duration_ms=230_000),
    ]


@pytest.fixture
def mock_catalog(bohemian_result: CatalogResult) -> MockCatalog:
    """Create a mock catalog that returns the sample result for any query."""
    return MockCatalog(default_results=[bohemian_result])
