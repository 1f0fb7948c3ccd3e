"""Tracking of received publishes so acknowledgements go out in order."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable


class PacketNotFoundError(LookupError):
    """Raised when acknowledging a packet that is not being tracked."""

    def __init__(self, message: str = "packet not found") -> None:
        super().__init__(message)


@dataclass
class _Tracked:
    publish: Any
    acknowledged: bool = False


class AcksTracker:
    """Keeps received publishes in arrival order and releases them once acked.

    Only the leading run of acknowledged packets is released by ``flush``,
    so acknowledgements are always sent in the order packets arrived.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._order: list[_Tracked] = []

    def add(self, publish: Any) -> None:
        """Start tracking ``publish`` unless its packet id is already tracked."""
        with self._lock:
            if any(t.publish.packet_id == publish.packet_id for t in self._order):
                return
            self._order.append(_Tracked(publish))

    def mark_as_acked(self, publish: Any) -> None:
        """Mark the tracked packet with the same packet id as acknowledged."""
        with self._lock:
            for tracked in self._order:
                if tracked.publish.packet_id == publish.packet_id:
                    tracked.acknowledged = True
                    return
        raise PacketNotFoundError()

    def flush(self, do: Callable[[list[Any]], None]) -> None:
        """Pass the leading acknowledged packets to ``do`` and stop tracking them."""
        with self._lock:
            ready = []
            for tracked in self._order:
                if not tracked.acknowledged:
                    break
                ready.append(tracked.publish)
            if not ready:
                return
            do(ready)
            del self._order[: len(ready)]

    def reset(self) -> None:
        """Forget every tracked packet, as after a disconnection."""
        with self._lock:
            self._order.clear()