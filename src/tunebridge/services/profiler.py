"""Taste profiling: summarize a set of library tracks."""

import logging
from collections import Counter
from collections.abc import Sequence

from tunebridge.lib.keywords import extract_keywords
from tunebridge.models.profile import PlaylistProfile
from tunebridge.models.track import Track

logger = logging.getLogger(__name__)

_TOP_ARTIST_COUNT = 5
_KEYWORD_COUNT = 10
_TITLE_KEYWORD_WEIGHT = 1
_ARTIST_KEYWORD_WEIGHT = 2


def analyze(songs: Sequence[Track]) -> PlaylistProfile:
    """Build a taste profile from a non-empty set of tracks.

    The profile is computed from scratch on every call; nothing is cached
    or shared between calls.

    - top_artists: the 5 most frequent lower-cased artist names.
    - keywords: the 10 heaviest title/artist keywords; title tokens weigh 1
      and artist tokens weigh 2 each time they occur.
    - avg_duration_ms: integer-truncated mean duration.
    - genres: distinct genre tags.
    - preferred_sources: source types by descending frequency.

    Ties keep first-seen order everywhere.

    Args:
        songs: Library tracks. Must not be empty; callers are expected to
            return early instead of profiling nothing.

    Returns:
        The derived PlaylistProfile.
    """
    artist_counts = Counter(song.artist.lower().strip() for song in songs)

    keyword_weights: Counter[str] = Counter()
    for song in songs:
        for token in extract_keywords(song.title):
            keyword_weights[token] += _TITLE_KEYWORD_WEIGHT
        for token in extract_keywords(song.artist):
            keyword_weights[token] += _ARTIST_KEYWORD_WEIGHT

    source_counts = Counter(song.source_type for song in songs)

    # Counter.most_common() is stable for equal counts (insertion order)
    profile = PlaylistProfile(
        top_artists=[a for a, _ in artist_counts.most_common(_TOP_ARTIST_COUNT)],
        keywords=[k for k, _ in keyword_weights.most_common(_KEYWORD_COUNT)],
        avg_duration_ms=sum(song.duration_ms for song in songs) // len(songs),
        genres=frozenset(song.genre for song in songs if song.genre),
        preferred_sources=[s for s, _ in source_counts.most_common()],
    )

    logger.debug(
        "Profiled %d songs: artists=%s keywords=%s",
        len(songs),
        profile.top_artists,
        profile.keywords,
    )
    return profile
