"""Response envelope in the shape expected by Ant Design Pro front ends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any

from adminkit.context import RequestContext, generate_msg_id


class ShowType(str, Enum):
    """How the front end displays an error."""

    SILENT = "0"
    MESSAGE_WARN = "1"
    MESSAGE_ERROR = "2"
    NOTIFICATION = "4"
    PAGE = "9"


def _plain(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass
class AntdResponse:
    """Envelope fields; empty ones are left out of the JSON shape."""

    success: bool = False
    error_code: str = ""
    error_message: str = ""
    show_type: str = ""
    trace_id: str = ""
    host: str = ""
    status: str = ""
    data: Any = None

    def apply_code(self, code: int) -> None:
        """Record a numeric code as an error code; 0 and 200 mean no error."""
        if code not in (0, 200):
            self.error_code = f"C{code}"

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for key, value in (
            ("success", self.success),
            ("errorCode", self.error_code),
            ("errorMessage", self.error_message),
            ("showType", str(self.show_type.value if isinstance(self.show_type, ShowType) else self.show_type)),
            ("traceId", self.trace_id),
            ("host", self.host),
            ("status", self.status),
        ):
            if value:
                body[key] = value
        if self.data is not None:
            body["data"] = _plain(self.data)
        return body


@dataclass
class _PageResponse(AntdResponse):
    total: int = 0
    current: int = 0
    page_size: int = 0

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        for key, value in (("total", self.total), ("current", self.current), ("pageSize", self.page_size)):
            if value:
                body[key] = value
        return body


@dataclass
class ListData:
    """A list with its total count and page position."""

    items: Any = None
    total: int = 0
    current: int = 0
    page_size: int = 0

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.items is not None:
            body["list"] = _plain(self.items)
        for key, value in (("total", self.total), ("current", self.current), ("pageSize", self.page_size)):
            if value:
                body[key] = value
        return body


def _finish(ctx: RequestContext, res: AntdResponse, status: Any) -> None:
    ctx.set("result", res)
    ctx.set("status", status)
    ctx.abort_with_status_json(HTTPStatus.OK, res.to_dict())


def error(ctx: RequestContext, err_code: str, err_msg: str, show_type: str) -> None:
    """Finish the request with an error envelope."""
    res = AntdResponse(success=False, error_message=err_msg, show_type=show_type)
    res.trace_id = generate_msg_id(ctx)
    res.error_code = err_code
    _finish(ctx, res, err_code)


def ok(ctx: RequestContext, data: Any) -> None:
    """Finish the request with a success envelope around data."""
    res = AntdResponse(success=True, status="done", data=data, trace_id=generate_msg_id(ctx))
    _finish(ctx, res, HTTPStatus.OK)


def up_file_ok(ctx: RequestContext, data: Any) -> None:
    """Finish an upload request with a success envelope around data."""
    res = AntdResponse(success=True, status="done", data=data, trace_id=generate_msg_id(ctx))
    _finish(ctx, res, HTTPStatus.OK)


def page_ok(ctx: RequestContext, result: Any, total: int, current: int, page_size: int) -> None:
    """Finish the request with one page of results and its position at top level."""
    res = _PageResponse(
        success=True,
        data=result,
        total=total,
        current=current,
        page_size=page_size,
        trace_id=generate_msg_id(ctx),
    )
    _finish(ctx, res, HTTPStatus.OK)


def list_ok(ctx: RequestContext, result: Any, total: int, current: int, page_size: int) -> None:
    """Finish the request with a list and its position nested under data."""
    res = AntdResponse(
        success=True,
        data=ListData(items=result, total=total, current=current, page_size=page_size),
        trace_id=generate_msg_id(ctx),
    )
    _finish(ctx, res, HTTPStatus.OK)


def custom(ctx: RequestContext, data: dict[str, Any]) -> None:
    """Finish the request with a caller-built body plus the trace id."""
    data["traceId"] = generate_msg_id(ctx)
    ctx.set("result", data)
    ctx.abort_with_status_json(HTTPStatus.OK, data)