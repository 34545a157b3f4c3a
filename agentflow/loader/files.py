"""Loaders for plain text and CSV files."""

from __future__ import annotations

import csv
import os
from typing import Iterable, Iterator

from agentflow.core import Document
from agentflow.loader.base import LoaderError


class TextLoader:
    """Loads a whole text file as a single document."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    def load(self) -> list[Document]:
        try:
            with open(self.path, "rb") as fh:
                size = os.fstat(fh.fileno()).st_size
                content = fh.read()
        except OSError as exc:
            raise LoaderError(f"failed to open text file {self.path}: {exc}") from exc
        metadata = {"source": self.path, "file_size": size, "content_type": "text/plain"}
        return [Document(content.decode("utf-8", errors="replace"), metadata)]


def _records(reader: Iterator[list[str]]) -> Iterator[list[str]]:
    """Yield non-blank records, stopping quietly at the first malformed one."""
    try:
        for record in reader:
            if record:
                yield record
    except csv.Error:
        return


class CSVLoader:
    """Loads each CSV row as a document of ``column: value`` lines.

    Only ``columns`` are included when given, otherwise every header column.
    Reading stops at the first row whose field count differs from the header.
    """

    def __init__(self, path: str | os.PathLike[str], columns: Iterable[str] | None = None) -> None:
        self.path = os.fspath(path)
        self.columns = list(columns or [])

    def load(self) -> list[Document]:
        try:
            fh = open(self.path, newline="", encoding="utf-8", errors="replace")
        except OSError as exc:
            raise LoaderError(f"failed to open csv file {self.path}: {exc}") from exc
        with fh:
            rows = _records(csv.reader(fh))
            header = next(rows, None)
            if header is None:
                raise LoaderError("failed to read csv header")
            columns = self.columns or header
            index = {name: i for i, name in enumerate(header)}
            docs: list[Document] = []
            for record in rows:
                if len(record) != len(header):
                    break
                content = "\n".join(
                    f"{col}: {record[index[col]]}"
                    for col in columns
                    if col in index and index[col] < len(record)
                )
                if not content:
                    continue
                metadata = {
                    "source": self.path,
                    "row_index": len(docs) + 1,
                    "content_type": "text/csv",
                }
                docs.append(Document(content, metadata))
        return docs