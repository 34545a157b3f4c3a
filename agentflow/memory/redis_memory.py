"""Conversation memory persisted in Redis."""

from __future__ import annotations

import json
import threading
from typing import Any

import redis

from agentflow.core import Message

DEFAULT_ADDR = "localhost:6379"
_CONNECT_TIMEOUT = 5.0


def _text(value: Any) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else value


def _connect(addr: str) -> redis.Redis:
    host, _, port = addr.rpartition(":")
    if not host:
        host, port = addr, "6379"
    return redis.Redis(
        host=host,
        port=int(port),
        socket_connect_timeout=_CONNECT_TIMEOUT,
        socket_timeout=_CONNECT_TIMEOUT,
    )


class RedisMemory:
    """Stores messages in a Redis list and values as JSON in a Redis hash,
    both scoped to ``session_id``."""

    def __init__(self, addr: str = DEFAULT_ADDR, session_id: str = "default", *, client: Any = None) -> None:
        self._client = client if client is not None else _connect(addr)
        self._session_id = session_id
        self._lock = threading.RLock()
        try:
            self._client.ping()
        except Exception as exc:
            raise ConnectionError(f"redis connection failed: {exc}") from exc

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def _messages_key(self) -> str:
        return f"messages:{self._session_id}"

    @property
    def _values_key(self) -> str:
        return f"kv:{self._session_id}"

    def add_message(self, msg: Message) -> None:
        data = json.dumps({"role": msg.role, "content": msg.content})
        with self._lock:
            self._client.lpush(self._messages_key, data)

    def get_messages(self) -> list[Message]:
        """Return messages oldest first."""
        with self._lock:
            raw = self._client.lrange(self._messages_key, 0, -1)
        messages = []
        for item in reversed(raw):
            data = json.loads(_text(item))
            messages.append(Message(data["role"], data["content"]))
        return messages

    def set(self, key: str, value: Any) -> None:
        data = json.dumps(value)
        with self._lock:
            self._client.hset(self._values_key, key, data)

    def get(self, key: str) -> Any:
        """Return the stored value, or None when the key is missing."""
        with self._lock:
            raw = self._client.hget(self._values_key, key)
        if raw is None:
            return None
        return json.loads(_text(raw))

    def close(self) -> None:
        self._client.close()