"""Unbounded in-process conversation memory."""

from __future__ import annotations

import threading
from typing import Any

from agentflow.core import Message


class InMemoryMemory:
    """Keeps every message and a key-value store; missing keys read as None."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._messages: list[Message] = []
        self._values: dict[str, Any] = {}

    def add_message(self, msg: Message) -> None:
        with self._lock:
            self._messages.append(msg)

    def get_messages(self) -> list[Message]:
        with self._lock:
            return list(self._messages)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value

    def get(self, key: str) -> Any:
        with self._lock:
            return self._values.get(key)