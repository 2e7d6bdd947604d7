"""An exception that doubles as an API result body."""

from __future__ import annotations

import time
from http import HTTPStatus
from typing import Any


class APIException(Exception):
    """An API outcome with code, success flag, message, timestamp and result."""

    def __init__(self, code: int, msg: str, result: Any = None, success: bool = False) -> None:
        super().__init__(msg)
        self.code = code
        self.success = success
        self.msg = msg
        self.timestamp = int(time.time())
        self.result = result

    def __str__(self) -> str:
        return self.msg

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "success": self.success,
            "msg": self.msg,
            "timestamp": self.timestamp,
            "result": self.result,
        }


def server_error() -> APIException:
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    return APIException(int(status), status.phrase)


def not_found() -> APIException:
    status = HTTPStatus.NOT_FOUND
    return APIException(int(status), status.phrase)


def unknown_error(message: str) -> APIException:
    return APIException(int(HTTPStatus.FORBIDDEN), message)


def parameter_error(message: str) -> APIException:
    return APIException(int(HTTPStatus.BAD_REQUEST), message)


def auth_error(message: str) -> APIException:
    return APIException(int(HTTPStatus.BAD_REQUEST), message)


def response_json(message: str, data: Any, success: bool) -> APIException:
    return APIException(int(HTTPStatus.OK), message, data, success)