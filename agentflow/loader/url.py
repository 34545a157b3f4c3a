"""Loaders that fetch documents over HTTP."""

from __future__ import annotations

import urllib.error
import urllib.request
from typing import Any, Callable

from agentflow.core import Document
from agentflow.loader.base import LoaderError
from agentflow.loader.html import extract_html_text

USER_AGENT = "agentflow/1.1.0"

Client = Callable[[urllib.request.Request], Any]


def _urlopen(request: urllib.request.Request) -> Any:
    try:
        return urllib.request.urlopen(request)
    except urllib.error.HTTPError as exc:
        # An error status is still a response; the caller checks the status.
        return exc


def _status(response: Any) -> int:
    status = getattr(response, "status", None)
    return status if status is not None else response.code


def _fetch(url: str, client: Client) -> tuple[int, str, bytes]:
    """GET the URL and return ``(status, content_type, body)`` for a 200 response."""
    try:
        request = urllib.request.Request(url, method="GET", headers={"User-Agent": USER_AGENT})
    except ValueError as exc:
        raise LoaderError(f"failed to create request for {url}: {exc}") from exc
    try:
        response = client(request)
    except (OSError, ValueError) as exc:
        raise LoaderError(f"failed to fetch {url}: {exc}") from exc
    try:
        status = _status(response)
        if status != 200:
            raise LoaderError(f"fetch {url} returned status {status}")
        try:
            body = response.read()
        except OSError as exc:
            raise LoaderError(f"failed to read response from {url}: {exc}") from exc
        content_type = response.headers.get("Content-Type") or ""
        return status, content_type, body
    finally:
        close = getattr(response, "close", None)
        if close is not None:
            close()


class URLLoader:
    """Fetches a URL and returns the raw response body as one document.

    ``client`` takes a ``urllib.request.Request`` and returns a response with
    ``status``, ``headers`` and ``read()``; the default uses urllib.
    """

    def __init__(self, url: str, client: Client | None = None) -> None:
        self.url = url
        self.client: Client = client or _urlopen

    def load(self) -> list[Document]:
        status, content_type, body = _fetch(self.url, self.client)
        metadata = {"source_url": self.url, "status_code": status, "content_type": content_type}
        return [Document(body.decode("utf-8", errors="replace"), metadata)]


class HTMLURLLoader:
    """Fetches an HTML page and returns its visible text as one document."""

    def __init__(self, url: str, client: Client | None = None) -> None:
        self.url = url
        self.client: Client = client or _urlopen

    def load(self) -> list[Document]:
        status, _, body = _fetch(self.url, self.client)
        text, title = extract_html_text(body)
        metadata = {
            "source_url": self.url,
            "title": title,
            "content_type": "text/html",
            "status_code": status,
        }
        return [Document(text, metadata)]