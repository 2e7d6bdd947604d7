"""Standard JSON response envelope for API handlers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from adminkit.context import RequestContext, generate_msg_id


def _plain(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass
class Response:
    """The envelope: request id, code, message, status and data."""

    request_id: str = ""
    code: int = 0
    msg: str = ""
    status: str = ""
    data: Any = None

    def clone(self) -> Response:
        return dataclasses.replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape; empty header fields are left out, data never is."""
        body: dict[str, Any] = {}
        if self.request_id:
            body["requestId"] = self.request_id
        if self.code:
            body["code"] = self.code
        if self.msg:
            body["msg"] = self.msg
        if self.status:
            body["status"] = self.status
        body["data"] = _plain(self.data)
        return body


@dataclass
class Page:
    """One page of a listing with its position and the total count."""

    count: int = 0
    page_index: int = 0
    page_size: int = 0
    items: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "pageIndex": self.page_index,
            "pageSize": self.page_size,
            "list": _plain(self.items),
        }


DEFAULT = Response()


def error(ctx: RequestContext, code: int, err: BaseException | None, msg: str) -> None:
    """Finish the request with an error envelope; msg overrides the error's text."""
    res = DEFAULT.clone()
    if err is not None:
        res.msg = str(err)
    if msg:
        res.msg = msg
    res.request_id = generate_msg_id(ctx)
    res.code = code
    res.status = "error"
    ctx.set("result", res)
    ctx.set("status", code)
    ctx.abort_with_status_json(HTTPStatus.OK, res.to_dict())


def ok(ctx: RequestContext, data: Any, msg: str) -> None:
    """Finish the request with a success envelope around data."""
    res = DEFAULT.clone()
    res.data = data
    if msg:
        res.msg = msg
    res.request_id = generate_msg_id(ctx)
    res.code = HTTPStatus.OK
    ctx.set("result", res)
    ctx.set("status", HTTPStatus.OK)
    ctx.abort_with_status_json(HTTPStatus.OK, res.to_dict())


def page_ok(
    ctx: RequestContext,
    result: Any,
    count: int,
    page_index: int,
    page_size: int,
    msg: str,
) -> None:
    """Finish the request with a success envelope around one page of results."""
    ok(ctx, Page(count=count, page_index=page_index, page_size=page_size, items=result), msg)


def custom(ctx: RequestContext, data: dict[str, Any]) -> None:
    """Finish the request with a caller-built body plus the request id."""
    data["requestId"] = generate_msg_id(ctx)
    ctx.set("result", data)
    ctx.abort_with_status_json(HTTPStatus.OK, data)