"""String and duration similarity primitives.

Pure functions shared by the track matcher and the recommendation ranker.
Catalog results are noisy: uploaders decorate titles with "(Official Video)",
artist channels end in "VEVO" or "- Topic", and durations drift by a few
seconds between catalogs. The helpers here clean that noise before
comparison and turn the comparison into a 0.0-1.0 score.

Cleaning is for comparison only; never display a cleaned string.
"""

import re

from rapidfuzz.distance import Levenshtein

# ============================================================================
# PRIVATE CONSTANTS - Cleaning patterns and duration tiers
# ============================================================================

# Parenthetical/bracketed annotations that decorate catalog titles,
# e.g. "(Official Music Video)", "[Lyrics]", "(Audio)", "(HD)"
_TITLE_NOISE_PATTERNS = (
    re.compile(r"\s*\((?:official|lyrics|audio)[^)]*\)", re.IGNORECASE),
    re.compile(r"\s*\[(?:official|lyrics|audio)[^\]]*\]", re.IGNORECASE),
    re.compile(r"\s*[(\[]h[dq][)\]]", re.IGNORECASE),
)

_TOPIC_SUFFIX = re.compile(r"\s*-\s*topic$", re.IGNORECASE)

_ARTIST_NOISE_PATTERNS = (
    _TOPIC_SUFFIX,
    re.compile(r"^vevo\b\s*", re.IGNORECASE),
    re.compile(r"\s*vevo$", re.IGNORECASE),
    re.compile(r"\s*official$", re.IGNORECASE),
)

# Dedup normalization: drop bracketed content and decoration words
_BRACKETED = re.compile(r"\([^)]*\)|\[[^\]]*\]")
_DEDUP_NOISE_WORDS = re.compile(r"\b(?:official|video|audio|lyrics|hd|hq)\b")
_WHITESPACE = re.compile(r"\s+")

# (max absolute difference in ms, score), checked in order
_DURATION_TIERS = (
    (3_000, 1.0),
    (15_000, 0.8),
    (30_000, 0.5),
    (60_000, 0.2),
)


# ============================================================================
# PUBLIC API - Similarity scores
# ============================================================================


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost edit distance (insert, delete, substitute)."""
    return Levenshtein.distance(a, b)


def levenshtein_similarity(a: str, b: str) -> float:
    """Edit-distance similarity normalized by the longer string.

    Returns:
        ``1 - distance / max(len(a), len(b))``, or 1.0 when both are empty.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def string_similarity(a: str, b: str) -> float:
    """Compare two strings and return a similarity score (0.0-1.0).

    Callers are expected to lower-case (and clean) both sides first.

    Strategy, first applicable wins:
    1. Identical strings score 1.0; a blank side scores 0.0.
    2. Substring containment scores the length ratio shorter/longer, so
       "queen" vs "queen live" is 0.5.
    3. Jaccard overlap of whitespace tokens longer than one character.
    4. Levenshtein similarity when either side has no such tokens.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Similarity score between 0.0 and 1.0.
    """
    if a == b:
        return 1.0
    if not a.strip() or not b.strip():
        return 0.0

    if a in b or b in a:
        shorter, longer = sorted((len(a), len(b)))
        return shorter / longer

    tokens_a = {t for t in a.split() if len(t) > 1}
    tokens_b = {t for t in b.split() if len(t) > 1}
    if not tokens_a or not tokens_b:
        return levenshtein_similarity(a, b)

    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


def duration_score(duration_a_ms: int, duration_b_ms: int) -> float:
    """Score how close two durations are.

    Within 3s scores 1.0, 15s 0.8, 30s 0.5, 60s 0.2, anything further 0.0.
    Boundaries are inclusive.
    """
    diff = abs(duration_a_ms - duration_b_ms)
    for max_diff, score in _DURATION_TIERS:
        if diff <= max_diff:
            return score
    return 0.0


def clamp_score(score: float) -> float:
    """Clamp a score into [0.0, 1.0]."""
    return min(1.0, max(0.0, score))


# ============================================================================
# PUBLIC API - Cleaning and normalization
# ============================================================================


def clean_title(title: str) -> str:
    """Strip upload decorations from a catalog title.

    Removes "(Official ...)", "(Lyrics ...)", "(Audio ...)" in round or
    square brackets, "(HD)", "(HQ)" and a trailing "- Topic". Case is kept.

    Example:
        >>> clean_title("Bohemian Rhapsody (Official Video)")
        'Bohemian Rhapsody'
    """
    cleaned = title
    for pattern in _TITLE_NOISE_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    cleaned = _TOPIC_SUFFIX.sub("", cleaned.strip())
    return cleaned.strip()


def clean_artist(artist: str) -> str:
    """Strip channel decorations from a catalog artist name.

    Removes a trailing "- Topic", a leading or trailing "VEVO" and a trailing
    "Official". Case is kept.

    Example:
        >>> clean_artist("QueenVEVO")
        'Queen'
    """
    cleaned = artist.strip()
    for pattern in _ARTIST_NOISE_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return cleaned.strip()


def normalize_for_dedup(title: str) -> str:
    """Normalize a title for duplicate detection.

    Lower-cases, drops parenthetical/bracketed content and the words
    official/video/audio/lyrics/hd/hq, then collapses whitespace.

    Example:
        >>> normalize_for_dedup("Karma Police (Official Video) [HD]")
        'karma police'
    """
    normalized = _BRACKETED.sub(" ", title.lower())
    normalized = _DEDUP_NOISE_WORDS.sub(" ", normalized)
    return _WHITESPACE.sub(" ", normalized).strip()
