"""Process-wide registry of databases, adapters, handlers and settings."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from adminkit.prefixed import Message, PrefixedCache, PrefixedLocker, PrefixedQueue

_log = logging.getLogger(__name__)

_MEMORY_QUEUE_SIZE = 10000
_POLL_INTERVAL = 0.1


@dataclass
class Router:
    """One route of the HTTP engine."""

    http_method: str = ""
    relative_path: str = ""
    handler: str = ""


class _MemoryQueue:
    """An in-process queue with one stream per consumer name."""

    def __init__(self, pool_size: int) -> None:
        self._pool_size = pool_size
        self._streams: dict[str, queue.Queue] = {}
        self._consumers: dict[str, Callable[[Message], Any]] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._threads: list[threading.Thread] = []

    def __str__(self) -> str:
        return "memory"

    def _stream(self, name: str) -> queue.Queue:
        with self._lock:
            stream = self._streams.get(name)
            if stream is None:
                stream = queue.Queue(maxsize=self._pool_size)
                self._streams[name] = stream
            return stream

    def register(self, name: str, func: Callable[[Message], Any]) -> None:
        with self._lock:
            self._consumers[name] = func

    def append(self, message: Message) -> None:
        self._stream(message.stream).put(message)

    def run(self) -> None:
        self._stop.clear()
        with self._lock:
            consumers = list(self._consumers.items())
        for name, func in consumers:
            thread = threading.Thread(target=self._consume, args=(name, func), daemon=True)
            thread.start()
            self._threads.append(thread)

    def _consume(self, name: str, func: Callable[[Message], Any]) -> None:
        stream = self._stream(name)
        while not self._stop.is_set():
            try:
                message = stream.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                continue
            try:
                func(message)
            except Exception:
                _log.exception("consumer %s failed", name)

    def shutdown(self) -> None:
        self._stop.set()
        for thread in self._threads:
            thread.join()
        self._threads.clear()


class Application:
    """Holds the shared resources of a running application, keyed by tenant."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._dbs: dict[str, Any] = {}
        self._casbins: dict[str, Any] = {}
        self._crontabs: dict[str, Any] = {}
        self._middlewares: dict[str, Any] = {}
        self._handlers: dict[str, list[Callable[..., Any]]] = {}
        self._configs: dict[str, Any] = {}
        self._app_routers: list[Callable[[], Any]] = []
        self._memory_queue = _MemoryQueue(_MEMORY_QUEUE_SIZE)
        self.engine: Any = None
        self.cache: Any = None
        self.queue: Any = None
        self.locker: Any = None
        self.logger: logging.Logger = logging.getLogger("adminkit")

    @staticmethod
    def _by_key(table: dict[str, Any], key: str) -> Any:
        if "*" in table:
            return table["*"]
        return table.get(key)

    def set_db(self, key: str, db: Any) -> None:
        with self._lock:
            self._dbs[key] = db

    @property
    def dbs(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._dbs)

    def get_db_by_key(self, key: str) -> Any:
        """Return the db for key; a db under '*' serves every key."""
        with self._lock:
            return self._by_key(self._dbs, key)

    def set_casbin(self, key: str, enforcer: Any) -> None:
        with self._lock:
            self._casbins[key] = enforcer

    @property
    def casbins(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._casbins)

    def get_casbin_key(self, key: str) -> Any:
        """Return the enforcer for key; one under '*' serves every key."""
        with self._lock:
            return self._by_key(self._casbins, key)

    def set_crontab(self, key: str, crontab: Any) -> None:
        with self._lock:
            self._crontabs[key] = crontab

    @property
    def crontabs(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._crontabs)

    def get_crontab_key(self, key: str) -> Any:
        """Return the scheduler for key; one under '*' serves every key."""
        with self._lock:
            return self._by_key(self._crontabs, key)

    def set_middleware(self, key: str, middleware: Any) -> None:
        with self._lock:
            self._middlewares[key] = middleware

    @property
    def middlewares(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._middlewares)

    def get_middleware_key(self, key: str) -> Any:
        with self._lock:
            return self._middlewares.get(key)

    def routers(self) -> list[Router]:
        """Return the route table of the engine, when it exposes routes()."""
        routes = getattr(self.engine, "routes", None)
        if not callable(routes):
            return []
        return [
            Router(http_method=r.method, relative_path=r.path, handler=r.handler)
            for r in routes()
        ]

    def cache_adapter(self, prefix: str = "") -> PrefixedCache:
        return PrefixedCache(prefix, self.cache)

    def queue_adapter(self, prefix: str = "") -> PrefixedQueue:
        return PrefixedQueue(prefix, self.queue)

    def locker_adapter(self, prefix: str = "") -> PrefixedLocker:
        return PrefixedLocker(prefix, self.locker)

    def memory_queue(self, prefix: str = "") -> PrefixedQueue:
        """Return the shared in-process queue under a prefix."""
        return PrefixedQueue(prefix, self._memory_queue)

    def set_handler(self, key: str, router_group: Callable[..., Any]) -> None:
        with self._lock:
            self._handlers.setdefault(key, []).append(router_group)

    @property
    def handlers(self) -> dict[str, list[Callable[..., Any]]]:
        with self._lock:
            return {key: list(value) for key, value in self._handlers.items()}

    def handlers_for(self, key: str) -> list[Callable[..., Any]]:
        with self._lock:
            return list(self._handlers.get(key, []))

    def stream_message(self, message_id: str, stream: str, values: dict[str, Any]) -> Message:
        """Build a message for the queue."""
        return Message(id=message_id, stream=stream, values=values)

    def set_config(self, key: str, value: Any) -> None:
        with self._lock:
            self._configs[key] = value

    def get_config(self, key: str) -> Any:
        with self._lock:
            return self._configs.get(key)

    def add_app_router(self, router: Callable[[], Any]) -> None:
        self._app_routers.append(router)

    @property
    def app_routers(self) -> list[Callable[[], Any]]:
        return list(self._app_routers)


runtime = Application()