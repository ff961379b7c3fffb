"""
Cooperative cancellation for password evaluation.

The evaluator only asks "has cancellation been requested" between sections,
so anything with an is_cancelled() method works as a signal.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable


@runtime_checkable
class CancellationSignal(Protocol):
    def is_cancelled(self) -> bool: ...


class CancellationToken:
    """Thread-safe one-way cancellation flag. Once cancelled it stays cancelled."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled()})"
