"""Candidate scoring and confidence classification for track matching.

This module turns catalog search results for one imported track into a
MatchOutcome. Scoring weighs title and artist similarity (after stripping
upload decorations) and duration proximity; classification maps the best
score onto Matched / MultipleOptions.

Consumers should use ``rank_candidates`` and ``classify_candidates`` rather
than re-implementing thresholds.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from tunebridge.config import MatcherConfig
from tunebridge.lib.similarity import (
    clamp_score,
    clean_artist,
    clean_title,
    duration_score,
    string_similarity,
)
from tunebridge.models.enums import SourceType
from tunebridge.models.matching import Matched, MatchOutcome, MultipleOptions, NotFound
from tunebridge.models.track import CatalogResult, TrackDescriptor

logger = logging.getLogger(__name__)

# ============================================================================
# PRIVATE CONSTANTS - Score weights (sum to 1.0)
# ============================================================================

_TITLE_WEIGHT = 0.4
_ARTIST_WEIGHT = 0.4
_DURATION_WEIGHT = 0.2


@dataclass(frozen=True)
class ScoredCandidate:
    """A catalog result paired with its score (0.0-1.0)."""

    result: CatalogResult
    score: float


# ============================================================================
# PUBLIC API
# ============================================================================


def score_candidate(
    descriptor: TrackDescriptor,
    candidate: CatalogResult,
    trusted_source: SourceType | None = None,
    trusted_source_bonus: float = 0.03,
) -> float:
    """Score how well a catalog result matches an imported track.

    ``0.4 * title + 0.4 * artist + 0.2 * duration``, compared
    case-insensitively after cleaning the candidate's title and artist.
    Candidates from ``trusted_source`` get a small bonus, capped at 1.0.

    Args:
        descriptor: The imported track.
        candidate: A catalog search result.
        trusted_source: The most trusted source type, if any.
        trusted_source_bonus: Bonus added for the trusted source.

    Returns:
        Match score between 0.0 and 1.0.
    """
    title_similarity = string_similarity(
        descriptor.name.lower(), clean_title(candidate.title).lower()
    )
    artist_similarity = string_similarity(
        descriptor.artist.lower(), clean_artist(candidate.artist).lower()
    )
    score = (
        _TITLE_WEIGHT * title_similarity
        + _ARTIST_WEIGHT * artist_similarity
        + _DURATION_WEIGHT
        * duration_score(descriptor.duration_ms, candidate.duration_ms)
    )

    if trusted_source is not None and candidate.source_type == trusted_source:
        score += trusted_source_bonus

    return clamp_score(score)


def rank_candidates(
    descriptor: TrackDescriptor,
    candidates: Sequence[CatalogResult],
    config: MatcherConfig | None = None,
) -> list[ScoredCandidate]:
    """Score candidates and sort them best first.

    The sort is stable: equal scores keep the catalog's original order.
    """
    config = config or MatcherConfig()
    trusted = config.preferred_sources[0] if config.preferred_sources else None
    scored = [
        ScoredCandidate(
            result=c,
            score=score_candidate(
                descriptor, c, trusted, config.preferred_source_bonus
            ),
        )
        for c in candidates
    ]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored


def classify_candidates(
    ranked: Sequence[ScoredCandidate],
    config: MatcherConfig | None = None,
) -> MatchOutcome:
    """Map ranked candidates onto a MatchOutcome.

    - No candidates: NotFound.
    - Top score >= high threshold (0.8): Matched.
    - Top score >= medium threshold (0.5): Matched if it is the only
      candidate, otherwise MultipleOptions with the best few.
    - Below medium: MultipleOptions anyway. A weak top hit is still offered
      as a choice rather than discarded; callers must not treat it as
      trustworthy.

    Args:
        ranked: Candidates sorted best first (see rank_candidates).
        config: Thresholds and option count.

    Returns:
        The classified outcome.
    """
    config = config or MatcherConfig()
    if not ranked:
        return NotFound()

    top = ranked[0]
    options = [s.result for s in ranked[: config.max_options]]

    if top.score >= config.high_confidence:
        return Matched(result=top.result, confidence=top.score)
    if top.score >= config.medium_confidence and len(ranked) < 2:
        return Matched(result=top.result, confidence=top.score)

    logger.debug(
        "Top score %.3f below auto-match threshold, offering %d options",
        top.score,
        len(options),
    )
    return MultipleOptions(options=options)
