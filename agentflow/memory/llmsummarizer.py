"""Short summaries of a message history, produced by prompting an LLM."""

from __future__ import annotations

from typing import Iterable, Protocol

from agentflow.core import Message

DEFAULT_SYSTEM_PROMPT = (
    "You are a concise conversation summarizer.\n"
    "Summarize the following conversation messages into a brief, factual summary "
    "that captures the key points, decisions, and important information.\n"
    "Keep the summary under 200 words.\n"
    "Focus on what was discussed, not how many messages there were."
)
FALLBACK_SYSTEM_PROMPT = (
    "You are a conversation summarizer. Summarize the key points of this conversation."
)


class LLM(Protocol):
    def complete(self, prompt: str) -> str: ...


class SummarizationError(RuntimeError):
    """Raised when a summary could not be produced."""


class LLMSummarizer:
    """Turns a list of messages into a short summary by prompting an LLM.

    With no ``system_prompt`` the default prompt is used; an empty one falls
    back to a shorter generic prompt.
    """

    def __init__(self, llm: LLM, system_prompt: str | None = None) -> None:
        self._llm = llm
        if system_prompt is None:
            system_prompt = DEFAULT_SYSTEM_PROMPT
        elif not system_prompt:
            system_prompt = FALLBACK_SYSTEM_PROMPT
        self._system_prompt = system_prompt

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    @system_prompt.setter
    def system_prompt(self, prompt: str) -> None:
        # An empty prompt leaves the current one in place.
        if prompt:
            self._system_prompt = prompt

    def build_prompt(self, messages: Iterable[Message]) -> str:
        """Return the full prompt sent to the LLM for these messages."""
        conversation = "".join(f"{msg.role}: {msg.content}\n" for msg in messages)
        return (
            f"{self._system_prompt}\n\n"
            "Conversation to summarize:\n"
            "---\n"
            f"{conversation}"
            "---\n\n"
            "Summary:"
        )

    def summarize(self, messages: list[Message]) -> str:
        """Summarise the messages; an empty list gives an empty summary."""
        if not messages:
            return ""
        prompt = self.build_prompt(messages)
        try:
            summary = self._llm.complete(prompt)
        except Exception as exc:
            raise SummarizationError(f"summarization failed: {exc}") from exc
        return summary.strip()