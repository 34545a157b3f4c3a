"""Summarising text and documents with an LLM."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, Protocol

from agentflow.core import Document
from agentflow.memory.llmsummarizer import SummarizationError

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 100
DOCUMENT_SEPARATOR = "\n\n---\n\n"
DEFAULT_SUMMARIZATION_PROMPT = "Please summarize the following text concisely:\n\n%s\n\nSummary:"
FINAL_SUMMARY_PROMPT = (
    "Please create a final summary combining these summaries:\n\n%s\n\nFinal Summary:"
)


class LLM(Protocol):
    def complete(self, prompt: str) -> str: ...


class Strategy(str, Enum):
    """How texts are summarised."""

    STUFF = "stuff"
    MAP_REDUCE = "map_reduce"


def _coerce_strategy(strategy: Any) -> Strategy:
    try:
        return Strategy(strategy)
    except ValueError:
        return Strategy.STUFF


def _texts(input: Any) -> list[str]:
    if isinstance(input, str):
        return [input]
    if isinstance(input, (list, tuple)):
        if all(isinstance(item, str) for item in input):
            return list(input)
        if all(isinstance(item, Document) for item in input):
            return [doc.page_content for doc in input]
    raise TypeError(
        f"expected string, list of strings, or list of Documents, got {type(input).__name__}"
    )


class SummarizationChain:
    """Summarises by stuffing all texts into one prompt, or by map-reduce:
    summarising overlapping chunks and then combining the summaries.

    The prompt template holds one ``%s`` for the text.
    """

    def __init__(
        self,
        llm: LLM,
        strategy: Strategy | str = Strategy.STUFF,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> None:
        self.llm = llm
        self.strategy = _coerce_strategy(strategy)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.prompt_template = DEFAULT_SUMMARIZATION_PROMPT

    def run(self, input: Any) -> str:
        """Summarise a string, a list of strings or a list of documents."""
        texts = _texts(input)
        if not texts:
            raise ValueError("no documents to summarize")
        if self.strategy is Strategy.MAP_REDUCE:
            return self._map_reduce(texts)
        return self._stuff(texts)

    def _complete(self, prompt: str, what: str) -> str:
        try:
            return self.llm.complete(prompt).strip()
        except Exception as exc:
            raise SummarizationError(f"{what} failed: {exc}") from exc

    def _stuff(self, texts: list[str]) -> str:
        combined = DOCUMENT_SEPARATOR.join(texts)
        return self._complete(self.prompt_template % (combined,), "summarization")

    def _map_reduce(self, texts: list[str]) -> str:
        summaries = [
            self._complete(self.prompt_template % (chunk,), "chunk summarization")
            for text in texts
            for chunk in self._chunks(text)
        ]
        if len(summaries) == 1:
            return summaries[0]
        combined = "\n\n".join(summaries)
        return self._complete(FINAL_SUMMARY_PROMPT % (combined,), "final summarization")

    def _chunks(self, text: str) -> Iterator[str]:
        if len(text) <= self.chunk_size:
            yield text
            return
        current = ""
        for ch in text:
            current += ch
            if len(current) >= self.chunk_size:
                yield current
                if self.chunk_overlap > 0 and len(current) > self.chunk_overlap:
                    current = current[-self.chunk_overlap:]
                else:
                    current = ""
        if current:
            yield current