"""Question answering over retrieved documents."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

from agentflow.core import Document

DEFAULT_K = 3
CONTEXT_SEPARATOR = "\n\n---\n\n"
DEFAULT_PROMPT = (
    "You are a helpful assistant. Answer the question based on the provided documents.\n\n"
    "Context:\n{context}\n\n"
    "Question: {question}\n\n"
    "Answer:"
)


class LLM(Protocol):
    def complete(self, prompt: str) -> str: ...


class Retriever(Protocol):
    def retrieve(self, query: str, k: int) -> list[Document]: ...


class QAError(RuntimeError):
    """Raised when retrieval or completion fails."""


def _fill(template: str, values: Mapping[str, str]) -> str:
    """Replace every placeholder in one pass; inserted text is not rescanned."""
    pattern = re.compile("|".join(re.escape(key) for key in values))
    return pattern.sub(lambda m: values[m.group()], template)


@dataclass
class QAInput:
    question: str


@dataclass
class QAOutput:
    answer: str
    sources: list[Document] = field(default_factory=list)


class QAChain:
    """Retrieves ``k`` documents for a question and asks the LLM to answer from them.

    The prompt template uses ``{context}`` and ``{question}`` placeholders.
    """

    def __init__(self, retriever: Retriever, llm: LLM, k: int = DEFAULT_K) -> None:
        self.retriever = retriever
        self.llm = llm
        self.k = k if k > 0 else DEFAULT_K
        self.prompt_template = DEFAULT_PROMPT
        self.context_separator = CONTEXT_SEPARATOR

    def run(self, input: str | QAInput) -> QAOutput:
        """Answer the question, returning the answer with its source documents."""
        if isinstance(input, str):
            question = input
        elif isinstance(input, QAInput):
            question = input.question
        else:
            raise TypeError(f"expected string or QAInput, got {type(input).__name__}")
        if not question:
            raise ValueError("question cannot be empty")

        try:
            docs = self.retriever.retrieve(question, self.k)
        except Exception as exc:
            raise QAError(f"retrieval failed: {exc}") from exc

        prompt = _fill(
            self.prompt_template,
            {"{context}": self._format(docs), "{question}": question},
        )
        try:
            answer = self.llm.complete(prompt)
        except Exception as exc:
            raise QAError(f"completion failed: {exc}") from exc
        return QAOutput(answer, list(docs))

    def _format(self, docs: list[Document]) -> str:
        return self.context_separator.join(
            f"Document {i}:\n{doc.page_content}" for i, doc in enumerate(docs, 1)
        )