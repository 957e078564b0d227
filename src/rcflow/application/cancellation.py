"""Cooperative cancellation for workflow runs."""

import threading


class CancellationToken:
    """
    Thread-safe flag checked by the executor before each command.

    A command already in flight is never interrupted; the run stops at the
    next command boundary.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()
