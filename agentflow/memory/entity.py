"""Memory wrapper that tracks named entities mentioned in messages."""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass, replace
from typing import Any

from agentflow.core import Message

_PROPER_NOUN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b", re.ASCII)
_DATE = re.compile(
    r"\b\d{4}-\d{2}-\d{2}\b"
    r"|\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\s+\d{1,2}(?:,?\s+\d{4})?\b",
    re.ASCII,
)
_CONTEXT_CHARS = 100


@dataclass
class EntityInfo:
    """What is known about one tracked entity."""

    name: str
    entity_type: str = "unknown"
    mentions: int = 0
    last_mention: str = ""
    summary: str = ""


class EntityMemory:
    """Wraps another memory and extracts capitalised names and dates from each message."""

    def __init__(self, inner: Any) -> None:
        self._inner = inner
        self._lock = threading.RLock()
        self._entities: dict[str, EntityInfo] = {}

    def add_message(self, msg: Message) -> None:
        with self._lock:
            self._inner.add_message(msg)
            self._extract(msg.content)

    def get_messages(self) -> list[Message]:
        """Return the inner messages, preceded by a summary of known entities if any."""
        with self._lock:
            messages = self._inner.get_messages()
            if not self._entities:
                return messages
            header = Message("system", f"[Known Entities]\n{self._entity_summary()}")
            return [header, *messages]

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._inner.set(key, value)

    def get(self, key: str) -> Any:
        with self._lock:
            return self._inner.get(key)

    def get_entities(self) -> dict[str, EntityInfo]:
        """Return a copy of every tracked entity keyed by name."""
        with self._lock:
            return {name: replace(info) for name, info in self._entities.items()}

    def add_entity(self, name: str, entity_type: str, summary: str) -> None:
        """Add or update an entity by hand, counting it as one more mention."""
        if not name:
            raise ValueError("entity name cannot be empty")
        with self._lock:
            info = self._entities.setdefault(name, EntityInfo(name=name))
            info.entity_type = entity_type
            info.summary = summary
            info.mentions += 1

    def _track(self, name: str, entity_type: str, context: str) -> None:
        info = self._entities.setdefault(name, EntityInfo(name=name, entity_type=entity_type))
        info.mentions += 1
        info.last_mention = context

    def _extract(self, text: str) -> None:
        context = text[:_CONTEXT_CHARS]
        for match in _PROPER_NOUN.finditer(text):
            noun = match.group().strip()
            if len(noun) >= 2:
                self._track(noun, "unknown", context)
        for match in _DATE.finditer(text):
            date = match.group().strip()
            if date:
                self._track(date, "date", context)

    def _entity_summary(self) -> str:
        lines = []
        for info in self._entities.values():
            line = f"- {info.name} ({info.entity_type}): mentioned {info.mentions} times"
            if info.summary:
                line += f" - {info.summary}"
            lines.append(line + "\n")
        return "".join(lines)