"""Models for parsing ytmusicapi responses.

These are internal models used to parse and validate responses from
the YouTube Music API. They may change if the API changes.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Artist",
    "SongSearchResult",
    "Thumbnail",
    "WatchPlaylist",
    "WatchTrack",
]


class YTMusicModel(BaseModel):
    """Base model for ytmusicapi responses."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class Thumbnail(YTMusicModel):
    """Video/album thumbnail."""

    url: str
    width: int = 0
    height: int = 0


class Artist(YTMusicModel):
    """Artist reference."""

    name: str
    id: str | None = None


def _largest_thumbnail_url(thumbnails: list[Thumbnail]) -> str | None:
    if not thumbnails:
        return None
    return max(thumbnails, key=lambda t: t.width).url


def _join_artists(artists: list[Artist]) -> str:
    return ", ".join(a.name for a in artists if a.name)


class SongSearchResult(YTMusicModel):
    """Result of search(filter="songs")."""

    video_id: str | None = Field(default=None, alias="videoId")
    title: str = ""
    artists: list[Artist] = Field(default_factory=list)
    duration: str | None = None
    duration_seconds: int | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)

    @property
    def artist(self) -> str:
        return _join_artists(self.artists)

    @property
    def thumbnail_url(self) -> str | None:
        return _largest_thumbnail_url(self.thumbnails)


class WatchTrack(YTMusicModel):
    """Track in a get_watch_playlist() response.

    The watch playlist uses 'thumbnail' and 'length' where search uses
    'thumbnails' and 'duration'.
    """

    video_id: str | None = Field(default=None, alias="videoId")
    title: str = ""
    artists: list[Artist] = Field(default_factory=list)
    length: str | None = None
    thumbnail: list[Thumbnail] = Field(default_factory=list)

    @property
    def artist(self) -> str:
        return _join_artists(self.artists)

    @property
    def thumbnail_url(self) -> str | None:
        return _largest_thumbnail_url(self.thumbnail)


class WatchPlaylist(YTMusicModel):
    """Response from get_watch_playlist()."""

    tracks: list[WatchTrack] = Field(default_factory=list)
