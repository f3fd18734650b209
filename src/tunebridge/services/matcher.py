"""Track matching service: resolve imported tracks to catalog results."""

import logging
import time
from collections.abc import Callable, Iterator, Sequence

from tunebridge.client import CatalogSearch
from tunebridge.config import MatcherConfig
from tunebridge.lib.matching import classify_candidates, rank_candidates
from tunebridge.models.cancel import CancelToken
from tunebridge.models.matching import (
    Matched,
    MatchOutcome,
    MatchProgress,
    MultipleOptions,
    NotFound,
    TrackMatchState,
)
from tunebridge.models.track import CatalogResult, TrackDescriptor

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]
TrackCallback = Callable[[int, TrackMatchState], None]


class TrackMatcherService:
    """Service for matching imported playlist tracks to catalog results.

    Pipeline Overview:
    ==================
    1. find_match() - Searches the catalogs with "<artist> <name>", scores
                      every candidate and classifies the best one
    2. iter_matches() - Runs find_match() over a batch sequentially, yielding
                      progress after each track and pausing between tracks
    3. match_all() - Callback flavour of iter_matches() returning all states

    Search failures never escape: they degrade to NotFound for that track.
    """

    def __init__(
        self, search: CatalogSearch, config: MatcherConfig | None = None
    ) -> None:
        """Initialize the service.

        Args:
            search: Catalog search capability (e.g. YTMusicCatalog).
            config: Optional matcher configuration. Uses defaults if not provided.
        """
        self._search = search
        self._config = config or MatcherConfig()

    # ============================================================================
    # PUBLIC API
    # ============================================================================

    def find_match(self, descriptor: TrackDescriptor) -> MatchOutcome:
        """Find the best catalog match for one imported track.

        Args:
            descriptor: The imported track to resolve.

        Returns:
            Matched, MultipleOptions, or NotFound. Never raises for search
            failures.
        """
        query = descriptor.search_query
        logger.debug("Finding match for: %s - %s", descriptor.artist, descriptor.name)

        candidates = self._search_candidates(query)
        if not candidates:
            logger.debug("No results found for: %s", query)
            return NotFound()

        ranked = rank_candidates(descriptor, candidates, self._config)
        top = ranked[0]
        logger.debug("Best match: '%s' with score %.3f", top.result.title, top.score)

        return classify_candidates(ranked, self._config)

    def iter_matches(
        self,
        descriptors: Sequence[TrackDescriptor],
        cancel_token: CancelToken | None = None,
    ) -> Iterator[MatchProgress]:
        """Match descriptors one by one, yielding progress after each.

        Tracks are processed strictly in input order with a fixed pause
        between consecutive tracks (none after the last) to respect upstream
        rate limits. Do not parallelize this loop.

        Cancellation is checked before each track, and a cancel during a
        pause ends it early. When requested, iteration simply stops and
        everything already yielded stays valid.

        Args:
            descriptors: Imported tracks to match.
            cancel_token: Optional token to stop between tracks.

        Yields:
            MatchProgress carrying the finished state of each track.
        """
        total = len(descriptors)
        for index, descriptor in enumerate(descriptors):
            if cancel_token and cancel_token.is_cancelled:
                logger.info("Matching cancelled after %d of %d tracks", index, total)
                return

            state = self._match_one(descriptor)
            yield MatchProgress(
                index=index, current=index + 1, total=total, state=state
            )

            if index < total - 1 and self._config.search_delay > 0:
                self._pause(cancel_token)

        logger.debug("Finished matching %d tracks", total)

    def match_all(
        self,
        descriptors: Sequence[TrackDescriptor],
        on_progress: ProgressCallback | None = None,
        on_each: TrackCallback | None = None,
        cancel_token: CancelToken | None = None,
    ) -> list[TrackMatchState]:
        """Match a batch of imported tracks.

        After each track, ``on_each(index, state)`` is called, then
        ``on_progress(fraction)`` with ``(index + 1) / len(descriptors)``, so
        progress reaches 1.0 only after the last track.

        Args:
            descriptors: Imported tracks to match.
            on_progress: Optional callback receiving the completed fraction.
            on_each: Optional callback receiving each finished state.
            cancel_token: Optional token to stop between tracks.

        Returns:
            Match states in input order. Shorter than the input only if
            cancelled.

        Example:
            >>> states = matcher.match_all(
            ...     playlist.tracks,
            ...     on_progress=lambda f: print(f"{f:.0%}"),
            ... )
        """
        states: list[TrackMatchState] = []
        for progress in self.iter_matches(descriptors, cancel_token):
            states.append(progress.state)
            if on_each:
                on_each(progress.index, progress.state)
            if on_progress:
                on_progress(progress.fraction)

        counts = count_outcomes(states)
        logger.info(
            "Matched %d/%d tracks (%d ambiguous, %d not found)",
            counts["matched"],
            len(descriptors),
            counts["multiple_options"],
            counts["not_found"],
        )
        return states

    # ============================================================================
    # INTERNAL
    # ============================================================================

    def _pause(self, cancel_token: CancelToken | None) -> None:
        delay = self._config.search_delay
        if cancel_token is None:
            time.sleep(delay)
        else:
            cancel_token.wait(delay)

    def _search_candidates(self, query: str) -> list[CatalogResult]:
        """Run the catalog search, converting any failure to no results."""
        try:
            return list(self._search.search(query, self._config.preferred_sources))
        except Exception as e:
            logger.warning("Search failed for '%s': %s", query, e)
            return []

    def _match_one(self, descriptor: TrackDescriptor) -> TrackMatchState:
        try:
            outcome = self.find_match(descriptor)
        except Exception as e:
            logger.exception(
                "Failed to match '%s - %s': %s", descriptor.artist, descriptor.name, e
            )
            outcome = NotFound()

        selected = outcome.result if isinstance(outcome, Matched) else None
        return TrackMatchState(
            descriptor=descriptor,
            outcome=outcome,
            is_processing=False,
            selected_result=selected,
        )


def count_outcomes(states: Sequence[TrackMatchState]) -> dict[str, int]:
    """Count batch states by outcome kind, e.g. for a summary line.

    Returns:
        Mapping with keys "matched", "multiple_options", "not_found", "skipped".
    """
    counts = {"matched": 0, "multiple_options": 0, "not_found": 0, "skipped": 0}
    for state in states:
        match state.outcome:
            case Matched():
                counts["matched"] += 1
            case MultipleOptions():
                counts["multiple_options"] += 1
            case NotFound():
                counts["not_found"] += 1
            case _:
                counts["skipped"] += 1
    return counts
