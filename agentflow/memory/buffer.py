"""Memory that keeps only the most recent messages."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any

from agentflow.core import Message

DEFAULT_MAX_MESSAGES = 100


class BufferMemory:
    """A FIFO buffer of the last ``max_messages`` messages plus a key-value store."""

    def __init__(self, max_messages: int = DEFAULT_MAX_MESSAGES) -> None:
        if max_messages <= 0:
            max_messages = DEFAULT_MAX_MESSAGES
        self._lock = threading.RLock()
        self._messages: deque[Message] = deque(maxlen=max_messages)
        self._values: dict[str, Any] = {}

    @property
    def max_messages(self) -> int:
        return self._messages.maxlen or DEFAULT_MAX_MESSAGES

    def add_message(self, msg: Message) -> None:
        """Append a message, evicting the oldest when over capacity."""
        with self._lock:
            self._messages.append(msg)

    def get_messages(self) -> list[Message]:
        with self._lock:
            return list(self._messages)

    def set(self, key: str, value: Any) -> None:
        if not key:
            raise ValueError("key cannot be empty")
        with self._lock:
            self._values[key] = value

    def get(self, key: str) -> Any:
        with self._lock:
            try:
                return self._values[key]
            except KeyError:
                raise KeyError(f"key not found: {key}") from None

    def clear(self) -> None:
        """Remove all messages and values."""
        with self._lock:
            self._messages.clear()
            self._values.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._messages)