"""Tests for CancellationToken."""

import threading

from rcflow.application.cancellation import CancellationToken


class TestCancellationToken:
    def test_starts_uncancelled(self) -> None:
        assert CancellationToken().cancelled is False

    def test_cancel(self) -> None:
        token = CancellationToken()

        token.cancel()

        assert token.cancelled is True

    def test_cancel_is_idempotent(self) -> None:
        token = CancellationToken()

        token.cancel()
        token.cancel()

        assert token.cancelled is True

    def test_cancel_from_other_thread(self) -> None:
        token = CancellationToken()
        worker = threading.Thread(target=token.cancel)

        worker.start()
        worker.join()

        assert token.cancelled is True
