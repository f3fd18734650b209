"""Recommendation service: propose new tracks from a set of known ones."""

import logging
import random
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from tunebridge.client import CatalogSearch
from tunebridge.config import RecommenderConfig
from tunebridge.lib.matching import ScoredCandidate
from tunebridge.lib.scoring import (
    is_likely_music,
    score_artist_hit,
    score_keyword_hit,
    score_related_hit,
)
from tunebridge.lib.similarity import normalize_for_dedup
from tunebridge.models.cancel import CancelToken
from tunebridge.models.enums import SourceType
from tunebridge.models.profile import PlaylistProfile
from tunebridge.models.track import CatalogResult, Track
from tunebridge.services.profiler import analyze

logger = logging.getLogger(__name__)

StrategyScorer = Callable[[PlaylistProfile, CatalogResult], float]


@dataclass(frozen=True)
class _SubQuery:
    """One catalog call issued by a strategy, with the scorer for its hits."""

    strategy: str
    label: str
    fetch: Callable[[], list[CatalogResult]]
    scorer: StrategyScorer


class RecommendationService:
    """Service for recommending new catalog tracks from library tracks.

    Pipeline Overview:
    ==================
    1. analyze() - Profiles the input songs (top artists, keywords, ...)
    2. _plan_sub_queries() - Plans the catalog calls of three strategies:
                  artist (search_by_artist on top artists), keyword
                  (search on top keywords) and related (related() on seed songs)
    3. _run_sub_queries() - Dispatches them on a thread pool and scores every
                  hit with its strategy's scorer; failures are skipped
    4. _rank() - Drops input songs and their titles, dedups by id, sorts by
                  score and truncates

    Results are merged in planning order, not completion order, so the
    ranking is deterministic whatever the thread scheduling.
    """

    def __init__(
        self, search: CatalogSearch, config: RecommenderConfig | None = None
    ) -> None:
        """Initialize the service.

        Args:
            search: Catalog search capability (e.g. YTMusicCatalog).
            config: Optional recommender configuration. Uses defaults if not
                provided.
        """
        self._search = search
        self._config = config or RecommenderConfig()

    # ============================================================================
    # PUBLIC API
    # ============================================================================

    def recommend(
        self,
        songs: Sequence[Track],
        limit: int | None = None,
        cancel_token: CancelToken | None = None,
        shuffle_seed: int | None = None,
    ) -> list[CatalogResult]:
        """Recommend catalog tracks similar to ``songs``.

        Args:
            songs: Library tracks to base recommendations on. An empty list
                returns an empty list without querying anything.
            limit: Maximum number of results (default from config, 10).
            cancel_token: Optional token; sub-queries not yet started when it
                fires are skipped, finished ones are still ranked.
            shuffle_seed: When given, shuffle the top artists and seed songs
                before picking the ones to query, for "refresh" variety.

        Returns:
            Recommended results, best first. Never contains an input song.

        Raises:
            ValueError: If limit is negative.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        if not songs:
            return []

        limit = self._config.default_limit if limit is None else limit
        logger.debug("Getting recommendations for %d songs", len(songs))

        profile = analyze(songs)
        sub_queries = self._plan_sub_queries(songs, profile, shuffle_seed)
        scored = self._run_sub_queries(sub_queries, profile, cancel_token)
        logger.debug("Collected %d raw recommendations", len(scored))

        return self._rank(scored, songs, limit)

    # ============================================================================
    # PLANNING
    # ============================================================================

    def _plan_sub_queries(
        self,
        songs: Sequence[Track],
        profile: PlaylistProfile,
        shuffle_seed: int | None,
    ) -> list[_SubQuery]:
        """Plan the catalog calls of all strategies, in merge order."""
        per_strategy = self._config.queries_per_strategy
        sources = self._source_types(profile)

        artists = list(profile.top_artists)
        seeds = list(songs)
        if shuffle_seed is not None:
            rng = random.Random(shuffle_seed)
            rng.shuffle(artists)
            rng.shuffle(seeds)

        queries = [
            _SubQuery(
                strategy="artist",
                label=artist,
                fetch=lambda a=artist: self._search.search_by_artist(a, sources),
                scorer=score_artist_hit,
            )
            for artist in artists[:per_strategy]
        ]
        queries += [
            _SubQuery(
                strategy="keyword",
                label=keyword,
                fetch=lambda k=keyword: self._search.search(k, sources),
                scorer=score_keyword_hit,
            )
            for keyword in profile.keywords[:per_strategy]
        ]
        queries += [
            _SubQuery(
                strategy="related",
                label=song.title,
                fetch=lambda s=song: self._search.related(
                    s.source_type, s.source_id, self._config.related_count
                ),
                scorer=score_related_hit,
            )
            for song in seeds[:per_strategy]
        ]
        return queries

    def _source_types(self, profile: PlaylistProfile) -> list[SourceType]:
        """Profile sources by frequency, then configured defaults not yet listed."""
        sources = list(profile.preferred_sources)
        sources += [s for s in self._config.default_sources if s not in sources]
        return sources

    # ============================================================================
    # EXECUTION
    # ============================================================================

    def _run_sub_queries(
        self,
        sub_queries: list[_SubQuery],
        profile: PlaylistProfile,
        cancel_token: CancelToken | None,
    ) -> list[ScoredCandidate]:
        """Run all sub-queries and concatenate their scored hits in plan order."""

        def run(query: _SubQuery) -> list[ScoredCandidate]:
            return self._run_sub_query(query, profile, cancel_token)

        if self._config.max_workers <= 1 or len(sub_queries) <= 1:
            batches = [run(q) for q in sub_queries]
        else:
            with ThreadPoolExecutor(
                max_workers=self._config.max_workers,
                thread_name_prefix="tunebridge-recommend",
            ) as executor:
                # map() yields in submission order
                batches = list(executor.map(run, sub_queries))

        return [candidate for batch in batches for candidate in batch]

    def _run_sub_query(
        self,
        query: _SubQuery,
        profile: PlaylistProfile,
        cancel_token: CancelToken | None,
    ) -> list[ScoredCandidate]:
        if cancel_token and cancel_token.is_cancelled:
            logger.debug(
                "Skipping %s query '%s': cancelled", query.strategy, query.label
            )
            return []

        try:
            hits = query.fetch()
        except Exception as e:
            logger.warning(
                "%s strategy query '%s' failed: %s",
                query.strategy.capitalize(),
                query.label,
                e,
            )
            return []

        logger.debug(
            "%s strategy found %d hits for '%s'",
            query.strategy.capitalize(),
            len(hits),
            query.label,
        )
        return [
            ScoredCandidate(result=hit, score=query.scorer(profile, hit))
            for hit in hits
        ]

    # ============================================================================
    # RANKING
    # ============================================================================

    def _rank(
        self,
        scored: list[ScoredCandidate],
        songs: Sequence[Track],
        limit: int,
    ) -> list[CatalogResult]:
        """Filter out known songs, dedup by id, sort by score and truncate."""
        existing_ids = {song.id for song in songs}
        existing_titles = {normalize_for_dedup(song.title) for song in songs}

        seen_ids: set[str] = set()
        unique: list[ScoredCandidate] = []
        for candidate in scored:
            result = candidate.result
            if result.id in existing_ids or result.id in seen_ids:
                continue
            if normalize_for_dedup(result.title) in existing_titles:
                continue
            if self._config.filter_non_music and not is_likely_music(result):
                logger.debug("Dropping non-music result: %s", result.title)
                continue
            seen_ids.add(result.id)
            unique.append(candidate)

        unique.sort(key=lambda c: c.score, reverse=True)
        return [c.result for c in unique[:limit]]
