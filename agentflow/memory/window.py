"""Token-aware sliding window memory."""

from __future__ import annotations

import threading
from typing import Any, Iterable

from agentflow.core import Message

DEFAULT_MAX_TOKENS = 4096
_TOKENS_PER_WORD = 1.3


def total_tokens(messages: Iterable[Message]) -> int:
    """Estimate tokens as 1.3 per whitespace-separated word, at least 1 per message."""
    return sum(max(1, int(len(msg.content.split()) * _TOKENS_PER_WORD)) for msg in messages)


class WindowMemory:
    """Keeps messages until their estimated tokens exceed ``max_tokens``, then evicts oldest."""

    def __init__(self, max_tokens: int = DEFAULT_MAX_TOKENS) -> None:
        if max_tokens <= 0:
            max_tokens = DEFAULT_MAX_TOKENS
        self._lock = threading.RLock()
        self._messages: list[Message] = []
        self._values: dict[str, Any] = {}
        self.max_tokens = max_tokens

    def add_message(self, msg: Message) -> None:
        """Add a message; the newest message is always kept."""
        with self._lock:
            self._messages.append(msg)
            while len(self._messages) > 1 and total_tokens(self._messages) > self.max_tokens:
                del self._messages[0]

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

    def estimate_tokens(self) -> int:
        with self._lock:
            return total_tokens(self._messages)