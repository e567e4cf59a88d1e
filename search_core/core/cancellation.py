# search_core/core/cancellation.py
# Cooperative cancellation: the search loop polls is_canceled() once per
# iteration, so an expansion in progress always finishes first.
from __future__ import annotations
import threading
from typing import Callable, Optional, Protocol


class CancellationSource(Protocol):
    def is_canceled(self) -> bool: ...


class CancellationToken:
    """Explicitly passed cancel flag, backed by a threading.Event so another thread may set it."""
    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def is_canceled(self) -> bool:
        return self._event.is_set()

    def reset(self) -> None:
        self._event.clear()


class _NeverCanceled:
    def is_canceled(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NEVER_CANCELED"


NEVER_CANCELED: CancellationSource = _NeverCanceled()


class ExpansionBudget:
    """
    Reports cancellation once it has been polled more than `limit` times.
    The engine polls once per loop iteration, so at most `limit` nodes are
    expanded.
    """
    def __init__(self, limit: int, parent: Optional[CancellationSource] = None) -> None:
        if limit < 0:
            raise ValueError(f"expansion budget must be >= 0, got {limit}")
        self.limit = limit
        self.polls = 0
        self.parent = parent

    def is_canceled(self) -> bool:
        if self.parent is not None and self.parent.is_canceled():
            return True
        self.polls += 1
        return self.polls > self.limit


class CancelableThread(threading.Thread):
    """
    Worker thread that owns a CancellationToken and hands it to `target`.

    Usage:
        t = CancelableThread(lambda token: engine.search(problem, frontier, token))
        t.start(); ...; t.cancel(); t.join()
        t.result   # whatever target returned
    """
    def __init__(self, target: Callable[[CancellationToken], object], name: Optional[str] = None) -> None:
        super().__init__(name=name, daemon=True)
        self.token = CancellationToken()
        self._work = target
        self.result = None
        self.error: Optional[BaseException] = None

    def run(self) -> None:
        try:
            self.result = self._work(self.token)
        except BaseException as e:
            # re-raised to the owner through join_result()
            self.error = e

    def cancel(self) -> None:
        self.token.cancel()

    def is_canceled(self) -> bool:
        return self.token.is_canceled()

    def join_result(self, timeout: Optional[float] = None):
        """Join the thread and return the target's result, re-raising anything it raised."""
        self.join(timeout)
        if self.error is not None:
            raise self.error
        return self.result
