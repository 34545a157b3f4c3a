"""Splitting text and documents into smaller, optionally overlapping chunks."""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol, Sequence

from agentflow.core import Document

DEFAULT_SEPARATOR = "\n\n"
DEFAULT_SEPARATORS = ("\n\n", "\n", " ", "")


class TextSplitter(Protocol):
    """Anything that can chunk text and documents."""

    def split(self, text: str) -> list[str]: ...

    def split_documents(self, docs: Iterable[Document]) -> list[Document]: ...


def _clamp_overlap(chunk_size: int, chunk_overlap: int) -> int:
    return chunk_size - 1 if chunk_overlap >= chunk_size else chunk_overlap


def _tail(text: str, overlap: int) -> str:
    """Return the last ``overlap`` characters to carry into the next chunk, or ''."""
    if overlap > 0 and len(text) > overlap:
        return text[-overlap:]
    return ""


def _split_documents(splitter: TextSplitter, docs: Iterable[Document]) -> list[Document]:
    return [
        Document(chunk, dict(doc.metadata))
        for doc in docs
        for chunk in splitter.split(doc.page_content)
    ]


class CharacterSplitter:
    """Chunks text on a separator, merging parts up to ``chunk_size`` characters.

    Text without the separator is cut into fixed-size pieces. Consecutive
    chunks share up to ``chunk_overlap`` characters; an overlap not smaller
    than the chunk size is reduced to ``chunk_size - 1``.
    """

    def __init__(self, chunk_size: int, chunk_overlap: int = 0, separator: str = DEFAULT_SEPARATOR) -> None:
        self.chunk_size = chunk_size
        self.chunk_overlap = _clamp_overlap(chunk_size, chunk_overlap)
        self.separator = separator

    def split(self, text: str) -> list[str]:
        """Return the chunks of ``text``."""
        if self.chunk_size <= 0:
            raise ValueError(f"chunk size must be positive, got {self.chunk_size}")
        parts = text.split(self.separator) if self.separator else [text]
        if len(parts) == 1:
            return list(self._split_by_character(text))

        chunks: list[str] = []
        current = ""
        for part in parts:
            if current and len(current) + len(self.separator) + len(part) > self.chunk_size:
                chunks.append(current)
                current = _tail(current, self.chunk_overlap)
            if current:
                current += self.separator
            current += part
        if current:
            chunks.append(current)
        return chunks

    def split_documents(self, docs: Iterable[Document]) -> list[Document]:
        """Split every document, giving each chunk a copy of its document's metadata."""
        return _split_documents(self, docs)

    def _split_by_character(self, text: str) -> Iterator[str]:
        current = ""
        for ch in text:
            current += ch
            if len(current) >= self.chunk_size:
                yield current
                current = _tail(current, self.chunk_overlap)
        if current:
            yield current


class RecursiveCharacterSplitter:
    """Chunks text on the first separator from ``separators`` that occurs in it.

    Pieces are stripped of surrounding whitespace, empty pieces are dropped,
    and the rest are joined back (with the separator stripped of whitespace)
    into chunks of at most ``chunk_size`` characters where possible.
    """

    def __init__(
        self,
        chunk_size: int,
        chunk_overlap: int = 0,
        separators: Sequence[str] = DEFAULT_SEPARATORS,
    ) -> None:
        self.chunk_size = chunk_size
        self.chunk_overlap = _clamp_overlap(chunk_size, chunk_overlap)
        self.separators = list(separators)

    def split(self, text: str) -> list[str]:
        """Return the chunks of ``text``."""
        separator = self._choose_separator(text)
        pieces = text.split(separator) if separator else [text]
        return self._merge(pieces, separator)

    def split_documents(self, docs: Iterable[Document]) -> list[Document]:
        """Split every document, giving each chunk a copy of its document's metadata."""
        return _split_documents(self, docs)

    def _choose_separator(self, text: str) -> str:
        fallback = self.separators[-1] if self.separators else ""
        for sep in self.separators:
            if sep == "":
                break
            if sep in text:
                return sep
        return fallback

    def _merge(self, pieces: Iterable[str], separator: str) -> list[str]:
        joiner = separator.strip()
        merged: list[str] = []
        current = ""
        for piece in (p.strip() for p in pieces):
            if not piece:
                continue
            candidate = current + joiner + piece if current else piece
            if len(candidate) <= self.chunk_size:
                current = candidate
                continue
            if current:
                merged.append(current)
            if self.chunk_overlap > 0 and len(current) > self.chunk_overlap:
                current = current[-self.chunk_overlap:] + joiner + piece
            else:
                current = piece
        if current:
            merged.append(current)
        return merged