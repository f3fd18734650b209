"""Track, catalog result and imported playlist models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tunebridge.models.enums import SourceType
from tunebridge.utils.duration import format_duration, format_total_duration


class TrackDescriptor(BaseModel):
    """A track imported from a third-party playlist, to be resolved to a catalog.

    Attributes:
        name: Track title as listed by the external playlist.
        artist: Primary artist name.
        album: Album name, if the source provided one.
        duration_ms: Track length in milliseconds.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    artist: str
    album: str | None = None
    duration_ms: int = Field(default=0, ge=0)

    @property
    def search_query(self) -> str:
        """Query string used to look this track up in a catalog."""
        return f"{self.artist} {self.name}"

    @property
    def formatted_duration(self) -> str:
        """Duration formatted as m:ss."""
        return format_duration(self.duration_ms)


class ImportedPlaylist(BaseModel):
    """A playlist imported from an external service, with its tracks."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str | None = None
    cover_url: str | None = None
    owner_name: str | None = None
    tracks: list[TrackDescriptor] = Field(default_factory=list)

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    @property
    def total_duration_ms(self) -> int:
        return sum(t.duration_ms for t in self.tracks)

    @property
    def formatted_total_duration(self) -> str:
        """Total length formatted as "1h 5m" or "42 min"."""
        return format_total_duration(self.total_duration_ms)


class CatalogResult(BaseModel):
    """One candidate returned by a catalog search.

    Attributes:
        id: Opaque identifier, unique per source type and source ID.
        title: Title as published in the catalog (often decorated).
        artist: Uploader or artist name as published in the catalog.
        thumbnail_url: Artwork URL, if any.
        duration_ms: Length in milliseconds (0 when unknown).
        source_type: Catalog the result comes from.
        source_id: Catalog-specific identifier (e.g. a YouTube video ID).
        source_url: Direct URL, if the catalog provided one.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    artist: str
    thumbnail_url: str | None = None
    duration_ms: int = 0
    source_type: SourceType
    source_id: str
    source_url: str | None = None

    def to_track(self) -> Track:
        """Convert into a library track (e.g. after the user adds it)."""
        return Track(
            id=self.id,
            title=self.title,
            artist=self.artist,
            thumbnail_url=self.thumbnail_url,
            duration_ms=self.duration_ms,
            source_type=self.source_type,
            source_id=self.source_id,
            source_url=self.source_url,
        )


class Track(BaseModel):
    """A song already present in the user's library."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    artist: str
    album: str | None = None
    duration_ms: int = 0
    thumbnail_url: str | None = None
    source_type: SourceType
    source_id: str
    source_url: str | None = None
    genre: str | None = None

    @field_validator("id", "source_id")
    @classmethod
    def non_empty_id(cls, v: str) -> str:
        """Validate that identifiers are non-empty strings."""
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v

    @property
    def formatted_duration(self) -> str:
        """Duration formatted as m:ss."""
        return format_duration(self.duration_ms)
