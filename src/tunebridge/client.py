"""Catalog search protocol and the YouTube Music implementation."""

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from ytmusicapi import YTMusic
from ytmusicapi.exceptions import YTMusicError

from tunebridge.config import APIConfig
from tunebridge.exceptions import CatalogSearchError
from tunebridge.models.enums import SourceType
from tunebridge.models.track import CatalogResult
from tunebridge.models.ytmusic import SongSearchResult, WatchPlaylist, WatchTrack
from tunebridge.utils.duration import parse_duration_ms

logger = logging.getLogger(__name__)

_WATCH_URL = "https://music.youtube.com/watch?v={video_id}"


class CatalogSearch(Protocol):
    """Protocol for searchable music catalogs.

    The matching and recommendation services only talk to catalogs through
    this protocol. Implementations may raise on failure; the services
    recover and treat a failed call as "no results".
    Implement this protocol to plug in other catalogs or test doubles.
    """

    def search(
        self, query: str, source_types: Sequence[SourceType]
    ) -> list[CatalogResult]:
        """Free-text search across the given source types."""
        ...

    def search_by_artist(
        self, artist: str, source_types: Sequence[SourceType]
    ) -> list[CatalogResult]:
        """Tracks by (or closely associated with) an artist."""
        ...

    def related(
        self, source_type: SourceType, source_id: str, count: int
    ) -> list[CatalogResult]:
        """Tracks related to a known track, excluding the track itself."""
        ...


class YTMusicCatalog:
    """CatalogSearch backed by YouTube Music (ytmusicapi).

    Serves SourceType.YOUTUBE only; requests for other source types return
    no results. ytmusicapi failures are raised as CatalogSearchError.
    """

    def __init__(
        self,
        ytmusic: YTMusic | None = None,
        config: APIConfig | None = None,
    ) -> None:
        """Initialize the catalog.

        Args:
            ytmusic: Optional YTMusic instance. Creates an unauthenticated one
                if not provided.
            config: Optional API configuration. Uses defaults if not provided.
        """
        self._ytm = ytmusic or YTMusic()
        self._config = config or APIConfig()

    def search(
        self, query: str, source_types: Sequence[SourceType]
    ) -> list[CatalogResult]:
        """Search YouTube Music songs.

        Args:
            query: Search query string.
            source_types: Requested source types; must include YOUTUBE.

        Returns:
            Parsed results, in catalog order.

        Raises:
            CatalogSearchError: If the API request fails.
        """
        if SourceType.YOUTUBE not in source_types:
            return []
        return [self._to_result(r) for r in self._search_songs(query) if r.video_id]

    def search_by_artist(
        self, artist: str, source_types: Sequence[SourceType]
    ) -> list[CatalogResult]:
        """Search songs for an artist name, keeping the artist's own tracks.

        Falls back to all results when none credit the artist directly, since
        search ranks the artist's tracks first anyway.

        Raises:
            CatalogSearchError: If the API request fails.
        """
        if SourceType.YOUTUBE not in source_types:
            return []

        results = [r for r in self._search_songs(artist) if r.video_id]
        wanted = artist.lower().strip()
        own = [
            r
            for r in results
            if any(a.name.lower().strip() == wanted for a in r.artists)
        ]
        return [self._to_result(r) for r in (own or results)]

    def related(
        self, source_type: SourceType, source_id: str, count: int
    ) -> list[CatalogResult]:
        """Fetch the "up next" radio of a YouTube track.

        Args:
            source_type: Source of the seed track; only YOUTUBE is served.
            source_id: Seed video ID.
            count: Maximum number of related tracks.

        Returns:
            Related tracks without the seed itself.

        Raises:
            CatalogSearchError: If the API request fails.
        """
        if source_type != SourceType.YOUTUBE or not source_id:
            return []

        logger.debug("Fetching related tracks for: %s", source_id)
        try:
            data = self._ytm.get_watch_playlist(videoId=source_id, limit=count + 1)
        except YTMusicError as e:
            logger.warning("YTMusic error for related %s: %s", source_id, e)
            raise CatalogSearchError(f"Related lookup failed: {e}") from e

        playlist = WatchPlaylist.model_validate(self._normalize_watch(data))
        related = [
            t for t in playlist.tracks if t.video_id and t.video_id != source_id
        ]
        return [self._watch_to_result(t) for t in related[:count]]

    # ============================================================================
    # INTERNAL
    # ============================================================================

    def _search_songs(self, query: str) -> list[SongSearchResult]:
        logger.debug("Searching songs: %s", query)
        try:
            data = self._ytm.search(
                query,
                filter="songs",
                limit=self._config.search_limit,
                ignore_spelling=self._config.ignore_spelling,
            )
        except YTMusicError as e:
            logger.warning("YTMusic error for search '%s': %s", query, e)
            raise CatalogSearchError(f"Search failed: {e}") from e

        return [
            SongSearchResult.model_validate(self._normalize_artists(r)) for r in data
        ]

    def _normalize_watch(self, data: dict[str, Any] | None) -> dict[str, Any]:
        """Normalize a watch playlist response before model validation."""
        tracks = (data or {}).get("tracks") or []
        return {"tracks": [self._normalize_artists(t) for t in tracks if t]}

    def _normalize_artists(self, item: dict[str, Any]) -> dict[str, Any]:
        normalized = dict(item)
        # ytmusicapi may return null for artists on some tracks.
        if normalized.get("artists") is None:
            normalized["artists"] = []
        return normalized

    def _to_result(self, song: SongSearchResult) -> CatalogResult:
        video_id = song.video_id or ""
        if song.duration_seconds is not None:
            duration_ms = song.duration_seconds * 1000
        else:
            duration_ms = parse_duration_ms(song.duration)
        return CatalogResult(
            id=f"yt_{video_id}",
            title=song.title,
            artist=song.artist,
            thumbnail_url=song.thumbnail_url,
            duration_ms=duration_ms,
            source_type=SourceType.YOUTUBE,
            source_id=video_id,
            source_url=_WATCH_URL.format(video_id=video_id),
        )

    def _watch_to_result(self, track: WatchTrack) -> CatalogResult:
        video_id = track.video_id or ""
        return CatalogResult(
            id=f"yt_{video_id}",
            title=track.title,
            artist=track.artist,
            thumbnail_url=track.thumbnail_url,
            duration_ms=parse_duration_ms(track.length),
            source_type=SourceType.YOUTUBE,
            source_id=video_id,
            source_url=_WATCH_URL.format(video_id=video_id),
        )
