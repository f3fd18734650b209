"""Cancellation token for batch matching and recommendation."""

import threading

from tunebridge.exceptions import CancellationError


class CancelToken:
    """Thread-safe, single-use cancellation flag backed by threading.Event.

    Services check the token between batch items and before each catalog
    sub-query. Work that already completed is kept.

    Example:
        >>> token = CancelToken()
        >>> states = matcher.match_all(descriptors, cancel_token=token)
        >>> # From another thread (e.g. a UI "stop" button):
        >>> token.cancel()
    """

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation. Safe to call from any thread, more than once."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise CancellationError if cancel() has been called."""
        if self._event.is_set():
            raise CancellationError("Operation cancelled")

    def wait(self, timeout: float) -> bool:
        """Block for up to ``timeout`` seconds, returning early on cancel().

        Returns:
            True if the token was cancelled, False if the timeout elapsed.
        """
        return self._event.wait(timeout)
