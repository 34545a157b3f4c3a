"""Memory wrapper that summarises older messages once the window is exceeded."""

from __future__ import annotations

import threading
from typing import Any, Protocol

from agentflow.core import Message
from agentflow.memory.llmsummarizer import SummarizationError

DEFAULT_WINDOW_SIZE = 10
DEFAULT_SUMMARY_KEY = "conversation_summary"


class Summarizer(Protocol):
    def summarize(self, messages: list[Message]) -> str: ...


class SummaryMemory:
    """Wraps another memory; when it holds more than ``window_size`` messages,
    the older ones are summarised and the summary is stored under ``summary_key``."""

    def __init__(self, inner: Any, summarizer: Summarizer | None, window_size: int = DEFAULT_WINDOW_SIZE) -> None:
        if window_size <= 0:
            window_size = DEFAULT_WINDOW_SIZE
        self._inner = inner
        self._summarizer = summarizer
        self._window_size = window_size
        self._summary_key = DEFAULT_SUMMARY_KEY
        self._lock = threading.RLock()

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def summary_key(self) -> str:
        with self._lock:
            return self._summary_key

    @summary_key.setter
    def summary_key(self, key: str) -> None:
        with self._lock:
            self._summary_key = key

    def add_message(self, msg: Message) -> None:
        with self._lock:
            self._inner.add_message(msg)
            messages = self._inner.get_messages()
            if len(messages) <= self._window_size or self._summarizer is None:
                return
            older = messages[: len(messages) - self._window_size]
            try:
                summary = self._summarizer.summarize(older)
            except SummarizationError:
                raise
            except Exception as exc:
                raise SummarizationError(f"summarization failed: {exc}") from exc
            self._inner.set(self._summary_key, summary)

    def _stored_summary(self) -> Any:
        try:
            return self._inner.get(self._summary_key)
        except KeyError:
            return None

    def get_messages(self) -> list[Message]:
        """Return the inner messages, preceded by the summary if one is stored."""
        with self._lock:
            messages = self._inner.get_messages()
            summary = self._stored_summary()
            if summary is None or summary == "":
                return messages
            header = Message("system", f"[Conversation Summary]\n{summary}")
            return [header, *messages]

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._inner.set(key, value)

    def get(self, key: str) -> Any:
        with self._lock:
            return self._inner.get(key)

    def get_summary(self) -> str:
        """Return the stored summary as text, or an empty string if there is none."""
        with self._lock:
            summary = self._inner.get(self._summary_key)
            if summary is None:
                return ""
            return summary if isinstance(summary, str) else str(summary)