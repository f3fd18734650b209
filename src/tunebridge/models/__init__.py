"""Data models for tunebridge.

Public API:
    TrackDescriptor - Imported track to resolve against catalogs
    ImportedPlaylist - Imported playlist with its descriptors
    CatalogResult - One catalog search candidate
    Track - Song already in the library
    MatchOutcome - Tagged union: Matched | MultipleOptions | NotFound | Skipped
    TrackMatchState - Per-descriptor state during batch matching
    PlaylistProfile - Taste profile used for recommendations
    SourceType - Catalog source enum

Internal (not exported):
    ytmusic.py - Models for parsing ytmusicapi responses
"""

from tunebridge.models.cancel import CancelToken
from tunebridge.models.enums import SourceType
from tunebridge.models.matching import (
    Matched,
    MatchOutcome,
    MatchProgress,
    MultipleOptions,
    NotFound,
    Skipped,
    TrackMatchState,
)
from tunebridge.models.profile import PlaylistProfile
from tunebridge.models.track import (
    CatalogResult,
    ImportedPlaylist,
    Track,
    TrackDescriptor,
)

__all__ = [
    "CancelToken",
    "CatalogResult",
    "ImportedPlaylist",
    "MatchOutcome",
    "MatchProgress",
    "Matched",
    "MultipleOptions",
    "NotFound",
    "PlaylistProfile",
    "Skipped",
    "SourceType",
    "Track",
    "TrackDescriptor",
    "TrackMatchState",
]
