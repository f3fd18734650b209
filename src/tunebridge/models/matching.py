"""Match outcome, per-track match state and batch progress models.

MatchOutcome is a tagged union discriminated on the ``kind`` field. Consumers
should branch on it with a ``match`` statement::

    match outcome:
        case Matched(result=result, confidence=confidence):
            ...
        case MultipleOptions(options=options):
            ...
        case NotFound() | Skipped():
            ...
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from tunebridge.models.track import CatalogResult, TrackDescriptor

# Upper bound on the candidates offered for an ambiguous match
MAX_OPTIONS = 3


class Matched(BaseModel):
    """The descriptor was resolved to a single catalog result."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["matched"] = "matched"
    result: CatalogResult
    confidence: float = Field(ge=0.0, le=1.0)


class MultipleOptions(BaseModel):
    """Several plausible candidates, best first. The user should choose."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multiple_options"] = "multiple_options"
    options: list[CatalogResult] = Field(min_length=1, max_length=MAX_OPTIONS)


class NotFound(BaseModel):
    """The catalogs returned no candidates (or could not be searched)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"


class Skipped(BaseModel):
    """The user chose to skip this track. Never produced by the matcher."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["skipped"] = "skipped"


MatchOutcome = Annotated[
    Matched | MultipleOptions | NotFound | Skipped,
    Field(discriminator="kind"),
]


class TrackMatchState(BaseModel):
    """State of a single descriptor during and after batch matching.

    ``selected_result`` is a user override: when set it wins over whatever
    the outcome proposes. Updates return new instances.

    Attributes:
        descriptor: The imported track being matched.
        outcome: Matching outcome (NotFound until processed).
        is_processing: Whether the track is currently being searched.
        selected_result: Result chosen by the user or by an automatic match.
    """

    model_config = ConfigDict(frozen=True)

    descriptor: TrackDescriptor
    outcome: MatchOutcome = Field(default_factory=NotFound)
    is_processing: bool = False
    selected_result: CatalogResult | None = None

    @property
    def is_matched(self) -> bool:
        return isinstance(self.outcome, Matched) or self.selected_result is not None

    @property
    def is_skipped(self) -> bool:
        return isinstance(self.outcome, Skipped)

    @property
    def display_result(self) -> CatalogResult | None:
        """The result to show and import for this track, if any."""
        if self.selected_result is not None:
            return self.selected_result
        match self.outcome:
            case Matched(result=result):
                return result
            case _:
                return None

    def select(self, result: CatalogResult) -> TrackMatchState:
        """Return a copy with ``result`` chosen by the user."""
        return self.model_copy(update={"selected_result": result})

    def skip(self) -> TrackMatchState:
        """Return a copy marked as skipped, dropping any selection."""
        return self.model_copy(update={"outcome": Skipped(), "selected_result": None})


class MatchProgress(BaseModel):
    """Progress update yielded by TrackMatcherService.iter_matches().

    Attributes:
        index: Zero-based position of the processed descriptor.
        current: Number of descriptors processed so far (1-indexed).
        total: Total number of descriptors in the batch.
        state: Final match state for this descriptor.
    """

    model_config = ConfigDict(frozen=True)

    index: int
    current: int
    total: int
    state: TrackMatchState

    @property
    def fraction(self) -> float:
        """Completed fraction of the batch (0.0-1.0)."""
        return self.current / self.total if self.total > 0 else 1.0
