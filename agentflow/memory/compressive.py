"""Memory wrapper that compresses history with an LLM once it grows too long."""

from __future__ import annotations

import contextlib
import threading
from typing import Any, Protocol

from agentflow.core import Message

DEFAULT_THRESHOLD = 20
RATIO_KEY = "compression_ratio"


class Compressor(Protocol):
    def compress(self, messages: list[Message]) -> list[Message]: ...


class CompressionError(RuntimeError):
    """Raised when the compressor fails."""


class CompressiveMemory:
    """Wraps another memory and runs a compressor once the message count exceeds
    ``threshold``. Compression happens once until :meth:`reset` is called."""

    def __init__(
        self,
        inner: Any,
        compressor: Compressor | None,
        threshold: int = DEFAULT_THRESHOLD,
        max_messages: int = 0,
    ) -> None:
        if threshold <= 0:
            threshold = DEFAULT_THRESHOLD
        if max_messages <= 0 or max_messages >= threshold:
            max_messages = threshold // 2
        self._inner = inner
        self._compressor = compressor
        self._threshold = threshold
        self._max_messages = max_messages
        self._compressed = False
        self._lock = threading.RLock()

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def max_messages(self) -> int:
        return self._max_messages

    @property
    def compressed(self) -> bool:
        with self._lock:
            return self._compressed

    def add_message(self, msg: Message) -> None:
        with self._lock:
            self._inner.add_message(msg)
            messages = self._inner.get_messages()
            if len(messages) <= self._threshold or self._compressor is None or self._compressed:
                return
            try:
                result = self._compressor.compress(messages)
            except Exception as exc:
                raise CompressionError(f"compression failed: {exc}") from exc
            self._compressed = True
            ratio = len(messages) / len(result) if result else float("inf")
            # Recording the ratio is best effort.
            with contextlib.suppress(Exception):
                self._inner.set(RATIO_KEY, ratio)

    def get_messages(self) -> list[Message]:
        with self._lock:
            return self._inner.get_messages()

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._inner.set(key, value)

    def get(self, key: str) -> Any:
        with self._lock:
            return self._inner.get(key)

    def compression_stats(self) -> dict[str, Any]:
        """Report whether compression ran, the limits, the ratio and the message count."""
        with self._lock:
            stats: dict[str, Any] = {
                "compressed": self._compressed,
                "threshold": self._threshold,
                "max_messages": self._max_messages,
            }
            try:
                ratio = self._inner.get(RATIO_KEY)
            except KeyError:
                ratio = None
            if ratio is not None:
                stats[RATIO_KEY] = ratio
            try:
                stats["current_messages"] = len(self._inner.get_messages())
            except Exception:
                stats["current_messages"] = 0
            return stats

    def reset(self) -> None:
        """Allow compression to run again."""
        with self._lock:
            self._compressed = False