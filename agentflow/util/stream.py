"""A bounded, non-blocking event buffer."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Iterator


class EventStream:
    """Holds up to ``buffer`` events; new events are dropped when full or closed."""

    def __init__(self, buffer: int = 1) -> None:
        self._capacity = buffer if buffer > 0 else 1
        self._events: deque[Any] = deque()
        self._closed = False
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def try_emit(self, event: Any) -> bool:
        """Buffer the event if there is room; return whether it was kept."""
        with self._lock:
            if self._closed or len(self._events) >= self._capacity:
                return False
            self._events.append(event)
            return True

    def write(self, event: Any) -> None:
        """Emit the event, silently dropping it if it cannot be buffered."""
        self.try_emit(event)

    def close(self) -> None:
        """Stop accepting events. Buffered events can still be drained."""
        with self._lock:
            self._closed = True

    def drain(self) -> Iterator[Any]:
        """Yield buffered events in order until the buffer is empty."""
        while True:
            with self._lock:
                if not self._events:
                    return
                event = self._events.popleft()
            yield event