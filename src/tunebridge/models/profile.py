"""Taste profile derived from a set of library tracks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tunebridge.models.enums import SourceType


class PlaylistProfile(BaseModel):
    """Aggregate statistics summarizing a set of tracks.

    Recomputed from scratch for every recommendation request.

    Attributes:
        top_artists: Up to 5 lower-cased artist names, most frequent first.
        keywords: Up to 10 title/artist keywords, most weighted first.
        avg_duration_ms: Mean track duration, truncated to an integer.
        genres: Distinct genre tags present on the tracks.
        preferred_sources: Source types present, most frequent first.
    """

    model_config = ConfigDict(frozen=True)

    top_artists: list[str] = Field(default_factory=list, max_length=5)
    keywords: list[str] = Field(default_factory=list, max_length=10)
    avg_duration_ms: int = 0
    genres: frozenset[str] = Field(default_factory=frozenset)
    preferred_sources: list[SourceType] = Field(default_factory=list)

    def has_artist(self, artist: str) -> bool:
        """Whether ``artist`` (any case) is one of the top artists."""
        return artist.lower().strip() in self.top_artists
