"""Configuration for tunebridge."""

from dataclasses import dataclass

from tunebridge.models.enums import SourceType
from tunebridge.models.matching import MAX_OPTIONS


@dataclass(frozen=True)
class APIConfig:
    """YouTube Music API configuration.

    Attributes:
        search_limit: Maximum number of search results to request per query.
        ignore_spelling: Whether to ignore spelling suggestions in search queries.
    """

    search_limit: int = 10
    ignore_spelling: bool = True


@dataclass(frozen=True)
class MatcherConfig:
    """Track matcher configuration.

    Attributes:
        preferred_sources: Catalog source types to search, most trusted first.
            Candidates from the first source get a small score bonus.
        search_delay: Seconds to wait between two consecutive batch items.
        max_options: Maximum number of options offered for ambiguous matches
            (1 to 3).
        high_confidence: Minimum score for an automatic match.
        medium_confidence: Minimum score for a single-candidate automatic match.
        preferred_source_bonus: Score bonus for candidates from the most
            trusted source.
    """

    preferred_sources: tuple[SourceType, ...] = (
        SourceType.YOUTUBE,
        SourceType.SOUNDCLOUD,
    )
    search_delay: float = 0.3
    max_options: int = 3
    high_confidence: float = 0.8
    medium_confidence: float = 0.5
    preferred_source_bonus: float = 0.03

    def __post_init__(self) -> None:
        if not 1 <= self.max_options <= MAX_OPTIONS:
            raise ValueError(
                f"max_options must be between 1 and {MAX_OPTIONS}, "
                f"got {self.max_options}"
            )
        if not 0.0 <= self.medium_confidence <= self.high_confidence <= 1.0:
            raise ValueError(
                "Confidence thresholds must satisfy "
                "0 <= medium_confidence <= high_confidence <= 1"
            )


@dataclass(frozen=True)
class RecommenderConfig:
    """Recommendation engine configuration.

    Attributes:
        default_limit: Number of recommendations returned when no limit is given.
        queries_per_strategy: Artists, keywords or seed songs queried per strategy.
        related_count: Number of related tracks requested per seed song.
        max_workers: Thread pool size for sub-queries. 1 runs them inline.
        filter_non_music: Drop candidates that look like non-music content.
        default_sources: Source types always queried after the profile's own
            sources (e.g. to find catalog tracks for a local-only library).
    """

    default_limit: int = 10
    queries_per_strategy: int = 3
    related_count: int = 5
    max_workers: int = 4
    filter_non_music: bool = False
    default_sources: tuple[SourceType, ...] = (SourceType.YOUTUBE,)
