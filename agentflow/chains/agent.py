"""An agent chain that combines an LLM with memory, retrieval and tools."""

from __future__ import annotations

from typing import Any, Protocol

from agentflow.core import Document, Message

DEFAULT_K = 3
DEFAULT_MAX_STEPS = 10
_HISTORY_MESSAGES = 5
_SNIPPET_CHARS = 200

_PREAMBLE = (
    "You are a helpful assistant with access to information and tools.\n"
    "Use the provided context and tools to help the user.\n\n"
)


class LLM(Protocol):
    def complete(self, prompt: str) -> str: ...


class Retriever(Protocol):
    def retrieve(self, query: str, k: int) -> list[Document]: ...


class Tool(Protocol):
    name: str
    description: str


class AgentError(RuntimeError):
    """Raised when the agent cannot store messages or produce a response."""


class AgentChain:
    """Answers a user message using conversation history, retrieved documents
    and a list of available tools as context for the LLM."""

    def __init__(
        self,
        llm: LLM,
        memory: Any = None,
        retriever: Retriever | None = None,
        k: int = DEFAULT_K,
        max_steps: int = DEFAULT_MAX_STEPS,
    ) -> None:
        self.llm = llm
        self.memory = memory
        self.retriever = retriever
        self.k = k
        self._max_steps = max_steps if max_steps > 0 else DEFAULT_MAX_STEPS
        self._tools: dict[str, Tool] = {}

    @property
    def max_steps(self) -> int:
        return self._max_steps

    @max_steps.setter
    def max_steps(self, steps: int) -> None:
        # Non-positive values leave the current limit in place.
        if steps > 0:
            self._max_steps = steps

    @property
    def tools(self) -> dict[str, Tool]:
        return dict(self._tools)

    def register_tool(self, tool: Tool) -> None:
        """Make a tool available to the agent, replacing one of the same name."""
        if not tool.name:
            raise ValueError("tool name cannot be empty")
        self._tools[tool.name] = tool

    def _store(self, role: str, content: str, what: str) -> None:
        if self.memory is None:
            return
        try:
            self.memory.add_message(Message(role, content))
        except Exception as exc:
            raise AgentError(f"failed to store {what}: {exc}") from exc

    def run(self, input: Any) -> str:
        """Respond to a user message and record both turns in memory."""
        if not isinstance(input, str):
            raise TypeError(f"expected string message, got {type(input).__name__}")
        if not input:
            raise ValueError("message cannot be empty")

        self._store("user", input, "message")
        prompt = self._build_prompt(self._build_context(input), input)
        try:
            response = self.llm.complete(prompt)
        except Exception as exc:
            raise AgentError(f"agent reasoning failed: {exc}") from exc
        response = response.strip()
        self._store("assistant", response, "response")
        return response

    def _history(self) -> list[Message]:
        if self.memory is None:
            return []
        try:
            return self.memory.get_messages()
        except Exception:
            return []

    def _retrieved(self, message: str) -> list[Document]:
        if self.retriever is None:
            return []
        try:
            return self.retriever.retrieve(message, self.k)
        except Exception:
            return []

    def _build_context(self, message: str) -> str:
        sections = []
        history = self._history()
        if history:
            lines = "".join(f"{m.role}: {m.content}\n" for m in history[-_HISTORY_MESSAGES:])
            sections.append(f"Conversation History:\n{lines}\n")
        docs = self._retrieved(message)
        if docs:
            lines = "".join(
                f"{i}. {doc.page_content[:_SNIPPET_CHARS]}\n" for i, doc in enumerate(docs, 1)
            )
            sections.append(f"Retrieved Context:\n{lines}\n")
        if self._tools:
            lines = "".join(f"- {name}: {tool.description}\n" for name, tool in self._tools.items())
            sections.append(f"Available Tools:\n{lines}\n")
        return "".join(sections)

    @staticmethod
    def _build_prompt(context: str, message: str) -> str:
        return f"{_PREAMBLE}{context}User Message: {message}\n\nResponse:"