"""The loader interface and helpers for combining loaders."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from agentflow.core import Document


class LoaderError(Exception):
    """Raised when a source cannot be opened, fetched or parsed."""


@runtime_checkable
class Loader(Protocol):
    """Anything that produces documents from some source."""

    def load(self) -> list[Document]: ...


class MultiLoader:
    """Runs several loaders in order and concatenates their documents."""

    def __init__(self, *loaders: Loader) -> None:
        self._loaders = list(loaders)

    @property
    def loaders(self) -> list[Loader]:
        return list(self._loaders)

    def load(self) -> list[Document]:
        """Load from every source; the first failure stops the whole load."""
        docs: list[Document] = []
        for loader in self._loaders:
            docs.extend(loader.load())
        return docs


class LoaderChain:
    """Presents a loader as a chain step so it can start a pipeline."""

    def __init__(self, loader: Loader) -> None:
        self.loader = loader

    def run(self, input: Any = None) -> list[Document]:
        """Ignore the input and return the loader's documents."""
        return self.loader.load()