"""Allocation of MQTT packet identifiers and tracking of pending responses."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field
from itertools import chain
from typing import Any, Optional

MID_MIN = 1
MID_MAX = 65535


class MidsExhaustedError(RuntimeError):
    """Raised when every packet identifier is already in use."""

    def __init__(self, message: str = "all message ids in use") -> None:
        super().__init__(message)


@dataclass(eq=False)
class CPContext:
    """Where the response to a control packet is delivered.

    ``context`` carries whatever the caller uses to track timeouts or
    cancellation; ``response`` receives the answering packet.
    """

    context: Any = None
    response: "queue.Queue[Any]" = field(default_factory=lambda: queue.Queue(maxsize=1))


class MIDs:
    """Hands out packet identifiers and maps them to their CPContext.

    Identifiers run from 1 to 65535. Allocation continues after the most
    recently issued identifier and wraps around to the start of the range.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_mid = 0
        self._index: list[Optional[CPContext]] = [None] * MID_MAX

    def request(self, context: CPContext) -> int:
        """Reserve a free identifier for ``context`` and return it."""
        with self._lock:
            slots = chain(range(self._last_mid, MID_MAX), range(0, self._last_mid))
            for slot in slots:
                if self._index[slot] is None:
                    self._index[slot] = context
                    self._last_mid = slot + 1
                    return slot + 1
        raise MidsExhaustedError()

    def get(self, mid: int) -> Optional[CPContext]:
        """Return the context held for ``mid``, or None; 0 is never valid."""
        if mid == 0:
            return None
        with self._lock:
            return self._index[mid - 1]

    def free(self, mid: int) -> None:
        """Release ``mid`` for reuse; 0 is ignored."""
        if mid == 0:
            return
        with self._lock:
            self._index[mid - 1] = None

    def clear(self) -> None:
        """Release every identifier."""
        with self._lock:
            self._index = [None] * MID_MAX