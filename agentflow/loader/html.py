"""Loading HTML files and extracting their readable text."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from html.parser import HTMLParser

from agentflow.core import Document
from agentflow.loader.base import LoaderError

_VOID = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "param", "source", "track", "wbr"}
)
_SKIPPED = frozenset({"script", "style", "noscript"})
_BLOCK = frozenset(
    {
        "p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "pre", "ul",
        "ol", "li", "dl", "dt", "dd", "table", "tr", "td", "th", "section",
        "article", "nav", "aside", "main",
    }
)
_CLOSES_P = frozenset(
    {
        "address", "article", "aside", "blockquote", "div", "dl", "fieldset", "footer",
        "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "main", "nav",
        "ol", "p", "pre", "section", "table", "ul",
    }
)
_IMPLIED_END = {
    "li": frozenset({"li"}),
    "dt": frozenset({"dt", "dd"}),
    "dd": frozenset({"dt", "dd"}),
    "tr": frozenset({"tr", "td", "th"}),
    "td": frozenset({"td", "th"}),
    "th": frozenset({"td", "th"}),
}


@dataclass
class _Node:
    tag: str | None
    text: str = ""
    children: list[_Node] = field(default_factory=list)


class _TreeBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = _Node("#document")
        self._stack = [self.root]

    def _close(self, tag: str) -> None:
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _CLOSES_P:
            self._close("p")
        implied = _IMPLIED_END.get(tag, frozenset())
        while len(self._stack) > 1 and self._stack[-1].tag in implied:
            self._stack.pop()
        node = _Node(tag)
        self._stack[-1].children.append(node)
        if tag not in _VOID:
            self._stack.append(node)

    def handle_endtag(self, tag: str) -> None:
        self._close(tag)

    def handle_data(self, data: str) -> None:
        children = self._stack[-1].children
        if children and children[-1].tag is None:
            children[-1].text += data
        else:
            children.append(_Node(None, data))


def _find_title(node: _Node) -> str:
    if node.tag == "title" and node.children and node.children[0].tag is None:
        if node.children[0].text:
            return node.children[0].text
    for child in node.children:
        title = _find_title(child)
        if title:
            return title
    return ""


def _collect_text(node: _Node) -> str:
    if node.tag is None:
        return node.text
    if node.tag in _SKIPPED:
        return ""
    parts = []
    for child in node.children:
        parts.append(_collect_text(child))
        if child.tag in _BLOCK:
            parts.append(" ")
    return "".join(parts)


def extract_html_text(markup: str | bytes) -> tuple[str, str]:
    """Return ``(text, title)`` for an HTML document.

    Script, style and noscript content is dropped and block elements are
    followed by a space.
    """
    if isinstance(markup, bytes):
        markup = markup.decode("utf-8", errors="replace")
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()
    return _collect_text(builder.root).strip(), _find_title(builder.root)


class HTMLLoader:
    """Loads a local HTML file as one document of its visible text."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    def load(self) -> list[Document]:
        try:
            with open(self.path, "rb") as fh:
                markup = fh.read()
        except OSError as exc:
            raise LoaderError(f"failed to open html file {self.path}: {exc}") from exc
        text, title = extract_html_text(markup)
        metadata = {"source": self.path, "title": title, "content_type": "text/html"}
        return [Document(text, metadata)]