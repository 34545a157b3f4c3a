"""Placing loaded documents into memories and run state."""

from __future__ import annotations

from typing import Any, Iterable

from agentflow.core import Document, Message


def inject_into_memory(mem: Any, key: str, docs: list[Document], as_messages: bool = False) -> None:
    """Store the documents under ``key``; optionally add each as a system message."""
    mem.set(key, docs)
    if as_messages:
        for doc in docs:
            mem.add_message(Message("system", doc.page_content))


def inject_into_state(state: Any, key: str, docs: Iterable[Document]) -> None:
    """Store the documents in the run state under ``key``."""
    state.set(key, docs)