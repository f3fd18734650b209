"""Custom exceptions for tunebridge.

The matching and recommendation services never let these escape to their
callers: search failures degrade to empty candidate sets and cancellation
stops work while keeping completed results. They are raised by catalog
adapters, input loaders and cancellation tokens.
"""


class TuneBridgeError(Exception):
    """Base exception for tunebridge.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CatalogSearchError(TuneBridgeError):
    """A catalog search request failed.

    Raised by CatalogSearch implementations when the upstream catalog
    cannot be reached or returns an unusable response.
    """


class CancellationError(TuneBridgeError):
    """Operation was cancelled via a CancelToken."""


class PlaylistParseError(TuneBridgeError):
    """Failed to parse an imported playlist or track library file."""
