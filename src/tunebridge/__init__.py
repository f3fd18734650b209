"""tunebridge - Match imported playlists to music catalogs and recommend tracks.

This library resolves tracks imported from third-party playlists (title,
artist, duration) to entries of searchable music catalogs, and proposes new
tracks based on a set of library songs. Catalogs are plugged in through the
CatalogSearch protocol; a YouTube Music implementation is included.

Designed for use as a library in applications, with a CLI for debugging
and development.

Examples:
    Match an imported playlist:
    ```python
    from tunebridge import create_matcher, TrackDescriptor

    matcher = create_matcher()
    outcome = matcher.find_match(
        TrackDescriptor(name="Bohemian Rhapsody", artist="Queen", duration_ms=354000)
    )
    ```

    Recommend from library songs:
    ```python
    from tunebridge import create_recommender

    recommender = create_recommender()
    for result in recommender.recommend(songs, limit=10):
        print(f"{result.artist} - {result.title}")
    ```
"""

from tunebridge.client import CatalogSearch, YTMusicCatalog
from tunebridge.config import APIConfig, MatcherConfig, RecommenderConfig
from tunebridge.exceptions import (
    CancellationError,
    CatalogSearchError,
    PlaylistParseError,
    TuneBridgeError,
)
from tunebridge.models import (
    CancelToken,
    CatalogResult,
    ImportedPlaylist,
    Matched,
    MatchOutcome,
    MatchProgress,
    MultipleOptions,
    NotFound,
    PlaylistProfile,
    Skipped,
    SourceType,
    Track,
    TrackDescriptor,
    TrackMatchState,
)
from tunebridge.services import RecommendationService, TrackMatcherService, analyze


def create_matcher(
    config: MatcherConfig | None = None,
    api_config: APIConfig | None = None,
    search: CatalogSearch | None = None,
) -> TrackMatcherService:
    """Create a track matcher.

    Uses the YouTube Music catalog unless ``search`` is given.

    Args:
        config: Optional matcher configuration.
        api_config: Optional YouTube Music API configuration.
        search: Optional catalog to use instead of YouTube Music.

    Returns:
        A configured TrackMatcherService instance.

    Examples:
        ```python
        matcher = create_matcher(MatcherConfig(search_delay=1.0))
        states = matcher.match_all(playlist.tracks, on_progress=print)
        ```
    """
    catalog = search if search is not None else YTMusicCatalog(config=api_config)
    return TrackMatcherService(catalog, config)


def create_recommender(
    config: RecommenderConfig | None = None,
    api_config: APIConfig | None = None,
    search: CatalogSearch | None = None,
) -> RecommendationService:
    """Create a recommendation service.

    Uses the YouTube Music catalog unless ``search`` is given.

    Args:
        config: Optional recommender configuration.
        api_config: Optional YouTube Music API configuration.
        search: Optional catalog to use instead of YouTube Music.

    Returns:
        A configured RecommendationService instance.
    """
    catalog = search if search is not None else YTMusicCatalog(config=api_config)
    return RecommendationService(catalog, config)


__all__ = [
    "APIConfig",
    "CancelToken",
    "CancellationError",
    "CatalogResult",
    "CatalogSearch",
    "CatalogSearchError",
    "ImportedPlaylist",
    "MatchOutcome",
    "MatchProgress",
    "Matched",
    "MatcherConfig",
    "MultipleOptions",
    "NotFound",
    "PlaylistParseError",
    "PlaylistProfile",
    "RecommendationService",
    "RecommenderConfig",
    "Skipped",
    "SourceType",
    "Track",
    "TrackDescriptor",
    "TrackMatchState",
    "TrackMatcherService",
    "TuneBridgeError",
    "YTMusicCatalog",
    "analyze",
    "create_matcher",
    "create_recommender",
]
