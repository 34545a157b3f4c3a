"""Core value types shared by memories, loaders and chains."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Message:
    """One turn of a conversation."""

    role: str
    content: str


@dataclass
class Document:
    """A piece of text together with metadata about where it came from."""

    page_content: str
    metadata: dict[str, Any] = field(default_factory=dict)