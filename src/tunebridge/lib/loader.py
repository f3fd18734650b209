"""Load imported playlists and library tracks from JSON files."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tunebridge.exceptions import PlaylistParseError
from tunebridge.models.track import ImportedPlaylist, Track, TrackDescriptor

logger = logging.getLogger(__name__)

_TRACK_LIST = TypeAdapter(list[Track])
_DESCRIPTOR_LIST = TypeAdapter(list[TrackDescriptor])


def _read_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PlaylistParseError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PlaylistParseError(f"Invalid JSON in {path}: {e}") from e


def load_playlist(path: Path) -> ImportedPlaylist:
    """Load an imported playlist.

    Accepts either a playlist object (``{"id", "name", "tracks": [...]}``) or
    a bare list of track descriptors, which becomes a playlist named after
    the file.

    Raises:
        PlaylistParseError: If the file is unreadable or doesn't validate.
    """
    data = _read_json(path)
    try:
        if isinstance(data, list):
            tracks = _DESCRIPTOR_LIST.validate_python(data)
            return ImportedPlaylist(id=path.stem, name=path.stem, tracks=tracks)
        return ImportedPlaylist.model_validate(data)
    except ValidationError as e:
        logger.debug("Playlist validation failed for %s: %s", path, e)
        raise PlaylistParseError(f"Invalid playlist file {path}: {e}") from e


def load_tracks(path: Path) -> list[Track]:
    """Load a JSON list of library tracks.

    Raises:
        PlaylistParseError: If the file is unreadable or doesn't validate.
    """
    data = _read_json(path)
    try:
        return _TRACK_LIST.validate_python(data)
    except ValidationError as e:
        logger.debug("Track list validation failed for %s: %s", path, e)
        raise PlaylistParseError(f"Invalid track list file {path}: {e}") from e
