"""Conversions between numbers, strings, ids and run modes."""

from __future__ import annotations

import dataclasses
import json
import math
import re
from datetime import datetime
from enum import Enum
from typing import Any

from adminkit.context import RequestContext

MYSQL = "mysql"
SQLITE = "sqlite3"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class Mode(str, Enum):
    """Run mode of the application."""

    DEV = "dev"
    TEST = "test"
    PROD = "prod"

    def __str__(self) -> str:
        return self.value


def round_half(value: float, digits: int) -> float:
    """Round to the given number of decimals, halves rounding up."""
    scale = 10.0**digits
    return math.trunc((value + 0.5 / scale) * scale) / scale


def string_to_int(text: str) -> int:
    """Parse a decimal integer strictly: an optional sign and digits only."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def current_time_str() -> str:
    """Return the local time as 'YYYY-MM-DD HH:MM:SS'."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def struct_to_json_str(obj: Any) -> str:
    """Serialise an object, dataclasses included, to compact JSON."""
    return json.dumps(obj, default=_json_default, separators=(",", ":"), ensure_ascii=False)


def ids_from_string(keys: str) -> list[int]:
    """Split comma-separated ids; an id that does not parse becomes 0."""
    ids = []
    for part in keys.split(","):
        try:
            ids.append(string_to_int(part))
        except ValueError:
            ids.append(0)
    return ids


def ids_from_param(key: str, ctx: RequestContext) -> list[int]:
    """Parse comma-separated ids from a path parameter."""
    return ids_from_string(ctx.param(key))