"""Enumerations for tunebridge domain models."""

from enum import StrEnum


class SourceType(StrEnum):
    """Catalog a track can be played or resolved from."""

    YOUTUBE = "youtube"
    SOUNDCLOUD = "soundcloud"
    BANDCAMP = "bandcamp"
    LOCAL = "local"

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        match self:
            case SourceType.YOUTUBE:
                return "YouTube"
            case SourceType.SOUNDCLOUD:
                return "SoundCloud"
            case SourceType.BANDCAMP:
                return "Bandcamp"
            case SourceType.LOCAL:
                return "Local file"
