"""Cache, lock and queue wrappers that put a tenant prefix in front of every key."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

PREFIX_KEY = "__prefix"
DEFAULT_WX_TOKEN_STORE_KEY = "wx_token_store_key"
_INTERVAL_TENANT = ""


@dataclass
class Message:
    """A queue message: its id, the stream it belongs to and its values."""

    id: str = ""
    stream: str = ""
    values: dict[str, Any] | None = None


class PrefixedCache:
    """Cache adapter that stores every key under a prefix."""

    def __init__(self, prefix: str, store: Any, wx_token_store_key: str = "") -> None:
        self.prefix = prefix
        self.store = store
        self.wx_token_store_key = wx_token_store_key or DEFAULT_WX_TOKEN_STORE_KEY

    def _key(self, key: str) -> str:
        return self.prefix + _INTERVAL_TENANT + key

    def __str__(self) -> str:
        if self.store is None:
            return ""
        return str(self.store)

    def connect(self) -> None:
        """Check that a store is wrapped; the store itself is connected by its owner."""
        if self.store is None:
            raise RuntimeError("no cache store configured")

    def get(self, key: str) -> str:
        return self.store.get(self._key(key))

    def set(self, key: str, value: Any, expire: int) -> None:
        self.store.set(self._key(key), value, expire)

    def delete(self, key: str) -> None:
        self.store.delete(self._key(key))

    def hash_get(self, hk: str, key: str) -> str:
        return self.store.hash_get(hk, self._key(key))

    def hash_del(self, hk: str, key: str) -> None:
        self.store.hash_del(hk, self._key(key))

    def increase(self, key: str) -> None:
        self.store.increase(self._key(key))

    def decrease(self, key: str) -> None:
        self.store.decrease(self._key(key))

    def expire(self, key: str, duration: Any) -> None:
        self.store.expire(self._key(key), duration)

    def token(self) -> dict[str, Any]:
        """Return the stored OAuth2 token."""
        raw = self.store.get(self._key(self.wx_token_store_key))
        return json.loads(raw)

    def put_token(self, token: Mapping[str, Any]) -> None:
        """Store an OAuth2 token until 200 seconds before it expires."""
        body = json.dumps(dict(token), separators=(",", ":"), ensure_ascii=False)
        self.store.set(
            self._key(self.wx_token_store_key),
            body,
            int(token["expires_in"]) - 200,
        )


class PrefixedLocker:
    """Distributed lock adapter that locks keys under a prefix."""

    def __init__(self, prefix: str, locker: Any) -> None:
        self.prefix = prefix
        self.locker = locker

    def __str__(self) -> str:
        return str(self.locker)

    def lock(self, key: str, ttl: int, options: Any = None) -> Any:
        """Obtain a lock on the prefixed key."""
        return self.locker.lock(self.prefix + _INTERVAL_TENANT + key, ttl, options)


class PrefixedQueue:
    """Queue adapter that tags each appended message with its prefix."""

    def __init__(self, prefix: str, queue: Any) -> None:
        self.prefix = prefix
        self.queue = queue

    def __str__(self) -> str:
        return str(self.queue)

    def register(self, name: str, func: Callable[[Message], Any]) -> None:
        """Register a consumer for a stream."""
        self.queue.register(name, func)

    def append(self, message: Message) -> None:
        """Tag the message with the prefix and hand it to the queue."""
        if message.values is None:
            message.values = {}
        message.values[PREFIX_KEY] = self.prefix
        self.queue.append(message)

    def run(self) -> None:
        self.queue.run()

    def shutdown(self) -> None:
        if self.queue is not None:
            self.queue.shutdown()