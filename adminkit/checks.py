"""Assertions that stop request handling with a coded error."""

from __future__ import annotations

import logging

_log = logging.getLogger(__name__)


class CustomError(Exception):
    """An error carrying the status code and message reported to the client."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"CustomError#{code}#{message}")
        self.code = code
        self.message = message


def ensure(condition: bool, msg: str, code: int = 200) -> None:
    """Raise CustomError when condition is false."""
    if not condition:
        raise CustomError(code, msg)


def has_error(err: BaseException | None, msg: str = "", code: int = 200) -> None:
    """Raise CustomError when err is set; msg defaults to the error's text."""
    if err is None:
        return
    if msg == "":
        msg = str(err)
    _log.error("error: %r", err, stacklevel=2)
    raise CustomError(code, msg) from err