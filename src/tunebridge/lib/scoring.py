"""Per-strategy scoring for recommendation candidates.

Each strategy scorer is a pure function of (profile, candidate) -> score in
[0, 1]. The recommendation service composes them; nothing here performs
I/O or keeps state.
"""

import re

from tunebridge.lib.keywords import tokenize
from tunebridge.lib.similarity import clamp_score
from tunebridge.models.profile import PlaylistProfile
from tunebridge.models.track import CatalogResult

# ============================================================================
# PRIVATE CONSTANTS - Strategy weights
# ============================================================================

_ARTIST_BASE = 0.5
_ARTIST_MATCH_BONUS = 0.3
_ARTIST_KEYWORD_STEP = 0.05
_ARTIST_KEYWORD_CAP = 0.2
_ARTIST_DURATION_BONUS = 0.1
_ARTIST_DURATION_WINDOW_MS = 60_000

_KEYWORD_BASE = 0.3
_KEYWORD_STEP = 0.1
_KEYWORD_CAP = 0.4
_KEYWORD_ARTIST_BONUS = 0.2

_RELATED_BASE = 0.6
_RELATED_ARTIST_BONUS = 0.2
_RELATED_KEYWORD_STEP = 0.05
_RELATED_KEYWORD_CAP = 0.15

# Non-music filter (ported heuristics for video catalogs)
_MIN_MUSIC_DURATION_MS = 90_000
_MAX_MUSIC_DURATION_MS = 720_000

_NON_MUSIC_PATTERNS = (
    re.compile(r"s\d+\s*e\d+"),
    re.compile(r"season\s*\d+\s*episode\s*\d+"),
    re.compile(r"episode\s*\d+"),
    re.compile(r"\bep\.?\s*\d+"),
    re.compile(r"part\s*\d+\s*of\s*\d+"),
    re.compile(r"#shorts?"),
    re.compile(r"\bshorts?\b"),
)

_NON_MUSIC_KEYWORDS = (
    "podcast", "episode", "trailer", "teaser", "preview", "full movie",
    "full episode", "documentary", "interview", "reaction", "explained",
    "tutorial", "how to", "review", "unboxing", "gameplay", "walkthrough",
    "let's play", "compilation", "best of 20", "top 10", "top 20",
    "tv show", "series", "season finale", "premiere", "behind the scenes",
    "making of", "commentary", "audiobook", "chapter", "reading",
    "#shorts", "#short", "shorts", "tiktok", "viral", "meme", "funny",
    "comedy", "prank", "challenge", "asmr", "satisfying", "news",
    "breaking", "update", "announcement", "stream highlights",
    "best moments", "clips", "vlog", "day in my life", "get ready with me",
    "grwm",
)  # fmt: skip

# "Show Name - Episode Title" uploads, unless the title says it is music
_EPISODE_MARKERS = ("episode", "ep ")
_EPISODE_MUSIC_WORDS = ("music", "song", "audio", "official")

_MUSIC_INDICATORS = (
    "official", "lyrics", "lyric video", "music video", "audio",
    "full song", "vevo", "topic", "records", "entertainment",
)  # fmt: skip


# ============================================================================
# PUBLIC API - Strategy scorers
# ============================================================================


def count_keyword_matches(profile: PlaylistProfile, text: str) -> int:
    """Count profile keywords that appear as tokens of ``text``."""
    tokens = set(tokenize(text))
    return sum(1 for keyword in profile.keywords if keyword in tokens)


def score_artist_hit(profile: PlaylistProfile, candidate: CatalogResult) -> float:
    """Score a hit from the artist-similarity strategy.

    0.5 base, +0.3 when the artist is a top artist, +0.05 per profile keyword
    in the title (at most +0.2), +0.1 when within a minute of the profile's
    average duration.
    """
    score = _ARTIST_BASE
    if profile.has_artist(candidate.artist):
        score += _ARTIST_MATCH_BONUS
    score += min(
        _ARTIST_KEYWORD_CAP,
        _ARTIST_KEYWORD_STEP * count_keyword_matches(profile, candidate.title),
    )
    if (
        abs(candidate.duration_ms - profile.avg_duration_ms)
        < _ARTIST_DURATION_WINDOW_MS
    ):
        score += _ARTIST_DURATION_BONUS
    return clamp_score(score)


def score_keyword_hit(profile: PlaylistProfile, candidate: CatalogResult) -> float:
    """Score a hit from the keyword-search strategy.

    0.3 base, +0.1 per profile keyword in title or artist (at most +0.4),
    +0.2 when the artist is a top artist.
    """
    score = _KEYWORD_BASE
    score += min(
        _KEYWORD_CAP,
        _KEYWORD_STEP * count_keyword_matches(profile, _searchable_text(candidate)),
    )
    if profile.has_artist(candidate.artist):
        score += _KEYWORD_ARTIST_BONUS
    return clamp_score(score)


def score_related_hit(profile: PlaylistProfile, candidate: CatalogResult) -> float:
    """Score a hit from the related-tracks strategy.

    0.6 base, +0.2 when the artist is a top artist, +0.05 per profile keyword
    in title or artist (at most +0.15).
    """
    score = _RELATED_BASE
    if profile.has_artist(candidate.artist):
        score += _RELATED_ARTIST_BONUS
    score += min(
        _RELATED_KEYWORD_CAP,
        _RELATED_KEYWORD_STEP
        * count_keyword_matches(profile, _searchable_text(candidate)),
    )
    return clamp_score(score)


def is_likely_music(candidate: CatalogResult) -> bool:
    """Heuristically reject non-music uploads (shorts, episodes, vlogs...).

    Video catalogs return plenty of content that merely mentions an artist.
    Known durations outside 1.5-12 minutes are rejected; unknown durations
    need at least one music indicator in the title or artist.
    """
    title = candidate.title.lower()
    artist = candidate.artist.lower()
    source_id = candidate.source_id.lower()

    if "shorts" in source_id or "/short/" in source_id:
        return False
    if any(pattern.search(title) for pattern in _NON_MUSIC_PATTERNS):
        return False
    if any(keyword in title for keyword in _NON_MUSIC_KEYWORDS):
        return False
    if _looks_like_episode(title):
        return False

    if candidate.duration_ms > 0:
        return (
            _MIN_MUSIC_DURATION_MS <= candidate.duration_ms <= _MAX_MUSIC_DURATION_MS
        )

    return any(
        indicator in title or indicator in artist for indicator in _MUSIC_INDICATORS
    )


def _searchable_text(candidate: CatalogResult) -> str:
    return f"{candidate.title} {candidate.artist}"


def _looks_like_episode(title: str) -> bool:
    return (
        " - " in title
        and not any(word in title for word in _EPISODE_MUSIC_WORDS)
        and any(marker in title for marker in _EPISODE_MARKERS)
    )
