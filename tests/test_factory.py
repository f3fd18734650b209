"""Tests for factory functions and public API."""

import pytest
from conftest import MockCatalog
from tunebridge import (
    APIConfig,
    MatcherConfig,
    RecommendationService,
    RecommenderConfig,
    TrackDescriptor,
    TrackMatcherService,
    YTMusicCatalog,
    create_matcher,
    create_recommender,
)


class FakeYTMusic:
    """Stands in for ytmusicapi.YTMusic so no session is created."""

    instances = 0

    def __init__(self) -> None:
        FakeYTMusic.instances += 1


@pytest.fixture
def fake_ytmusic(monkeypatch: pytest.MonkeyPatch) -> type[FakeYTMusic]:
    FakeYTMusic.instances = 0
    monkeypatch.setattr("tunebridge.client.YTMusic", FakeYTMusic)
    return FakeYTMusic


class TestCreateMatcher:
    """Tests for create_matcher factory function."""

    def test_creates_matcher_with_defaults(
        self, fake_ytmusic: type[FakeYTMusic]
    ) -> None:
        """Should create a matcher backed by YouTube Music."""
        matcher = create_matcher()

        assert isinstance(matcher, TrackMatcherService)
        assert isinstance(matcher._search, YTMusicCatalog)
        assert fake_ytmusic.instances == 1

    def test_uses_injected_catalog(
        self, mock_catalog: MockCatalog, fake_ytmusic: type[FakeYTMusic]
    ) -> None:
        """Should use the given catalog instead of YouTube Music."""
        matcher = create_matcher(MatcherConfig(search_delay=0), search=mock_catalog)
        matcher.find_match(TrackDescriptor(name="Song", artist="Artist"))

        assert mock_catalog.search_calls
        assert fake_ytmusic.instances == 0

    def test_passes_api_config(self, fake_ytmusic: type[FakeYTMusic]) -> None:
        matcher = create_matcher(api_config=APIConfig(search_limit=5))
        assert matcher._search._config.search_limit == 5


class TestCreateRecommender:
    """Tests for create_recommender factory function."""

    def test_creates_recommender_with_defaults(
        self, fake_ytmusic: type[FakeYTMusic]
    ) -> None:
        recommender = create_recommender(RecommenderConfig(max_workers=1))

        assert isinstance(recommender, RecommendationService)
        assert isinstance(recommender._search, YTMusicCatalog)

    def test_uses_injected_catalog(self, mock_catalog: MockCatalog) -> None:
        recommender = create_recommender(search=mock_catalog)
        assert recommender.recommend([]) == []


class TestPublicAPI:
    """Tests for public API exports."""

    def test_all_expected_exports_available(self) -> None:
        """All documented exports should be available."""
        import tunebridge

        for name in tunebridge.__all__:
            assert hasattr(tunebridge, name), name

        # Factories
        assert "create_matcher" in tunebridge.__all__
        assert "create_recommender" in tunebridge.__all__

        # Catalog
        assert "CatalogSearch" in tunebridge.__all__
        assert "YTMusicCatalog" in tunebridge.__all__

        # Models
        assert "MatchOutcome" in tunebridge.__all__
        assert "TrackMatchState" in tunebridge.__all__
        assert "PlaylistProfile" in tunebridge.__all__

        # Exceptions
        assert "TuneBridgeError" in tunebridge.__all__
        assert "CatalogSearchError" in tunebridge.__all__
