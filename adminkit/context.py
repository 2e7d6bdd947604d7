"""Per-request state shared by handlers: headers, path parameters and stored values."""

from __future__ import annotations

import uuid
from typing import Any

TRAFFIC_KEY = "X-Request-Id"
LOGGER_KEY = "_admin-logger-request"
ORM_KEY = "db"


class RequestContext:
    """Holds one request's headers and parameters and collects its response."""

    def __init__(
        self,
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        query: dict[str, str] | None = None,
    ) -> None:
        self.method = method
        self.path = path
        self._headers = {name.lower(): value for name, value in (headers or {}).items()}
        self.params = dict(params or {})
        self.query = dict(query or {})
        self.response_headers: dict[str, str] = {}
        self.status: int | None = None
        self.body: Any = None
        self.aborted = False
        self._values: dict[str, Any] = {}

    def get_header(self, name: str) -> str:
        """Return a request header, or an empty string when it is absent."""
        return self._headers.get(name.lower(), "")

    def set_header(self, name: str, value: str) -> None:
        """Set a response header; an empty value removes it."""
        if value == "":
            self.response_headers.pop(name, None)
        else:
            self.response_headers[name] = value

    def get(self, key: str) -> Any:
        """Return a stored value, or None when nothing is stored under key."""
        return self._values.get(key)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def param(self, key: str) -> str:
        """Return a path parameter, or an empty string when it is absent."""
        return self.params.get(key, "")

    def abort_with_status_json(self, status: int, body: Any) -> None:
        """Stop handling and record a JSON response."""
        self.status = status
        self.body = body
        self.aborted = True


def generate_msg_id(ctx: RequestContext) -> str:
    """Return the request id header, creating one and echoing it when missing."""
    request_id = ctx.get_header(TRAFFIC_KEY)
    if request_id == "":
        request_id = str(uuid.uuid4())
        ctx.set_header(TRAFFIC_KEY, request_id)
    return request_id


def get_orm(ctx: RequestContext) -> Any:
    """Return the database handle stored on the context."""
    db = ctx.get(ORM_KEY)
    if db is None:
        raise LookupError("db connect not exist")
    return db