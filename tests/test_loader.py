"""Tests for JSON playlist and library loading."""

import json
from pathlib import Path

import pytest
from tunebridge.exceptions import PlaylistParseError
from tunebridge.lib.loader import load_playlist, load_tracks
from tunebridge.models.enums import SourceType


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadPlaylist:
    """Tests for load_playlist()."""

    def test_playlist_object(self, tmp_path: Path) -> None:
        path = write_json(
            tmp_path / "export.json",
            {
                "id": "37i9dQZF1DXcBWIGoYBM5M",
                "name": "Today's Top Hits",
                "owner_name": "Spotify",
                "tracks": [
                    {
                        "name": "Bohemian Rhapsody",
                        "artist": "Queen",
                        "album": "A Night at the Opera",
                        "duration_ms": 354000,
                    }
                ],
            },
        )

        playlist = load_playlist(path)

        assert playlist.name == "Today's Top Hits"
        assert playlist.owner_name == "Spotify"
        assert playlist.track_count == 1
        assert playlist.tracks[0].album == "A Night at the Opera"

    def test_bare_descriptor_list(self, tmp_path: Path) -> None:
        path = write_json(
            tmp_path / "road_trip.json",
            [
                {"name": "Hello", "artist": "Adele"},
                {"name": "Creep", "artist": "Radiohead", "duration_ms": 238000},
            ],
        )

        playlist = load_playlist(path)

        assert playlist.id == "road_trip"
        assert playlist.name == "road_trip"
        assert [t.name for t in playlist.tracks] == ["Hello", "Creep"]
        assert playlist.tracks[0].duration_ms == 0

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(PlaylistParseError, match="Invalid JSON"):
            load_playlist(path)

    def test_missing_fields(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "bad.json", [{"name": "No artist"}])

        with pytest.raises(PlaylistParseError, match="Invalid playlist file"):
            load_playlist(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(PlaylistParseError, match="Cannot read"):
            load_playlist(tmp_path / "missing.json")


class TestLoadTracks:
    """Tests for load_tracks()."""

    def test_track_list(self, tmp_path: Path) -> None:
        path = write_json(
            tmp_path / "library.json",
            [
                {
                    "id": "yt_abc",
                    "title": "Karma Police",
                    "artist": "Radiohead",
                    "duration_ms": 264000,
                    "source_type": "youtube",
                    "source_id": "abc",
                    "genre": "rock",
                }
            ],
        )

        tracks = load_tracks(path)

        assert len(tracks) == 1
        assert tracks[0].source_type == SourceType.YOUTUBE
        assert tracks[0].genre == "rock"

    def test_empty_list(self, tmp_path: Path) -> None:
        assert load_tracks(write_json(tmp_path / "empty.json", [])) == []

    def test_not_a_list(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "library.json", {"tracks": []})

        with pytest.raises(PlaylistParseError, match="Invalid track list"):
            load_tracks(path)

    def test_unknown_source_type(self, tmp_path: Path) -> None:
        path = write_json(
            tmp_path / "library.json",
            [
                {
                    "id": "x",
                    "title": "Song",
                    "artist": "Artist",
                    "source_type": "napster",
                    "source_id": "x",
                }
            ],
        )

        with pytest.raises(PlaylistParseError):
            load_tracks(path)
