"""A timestamp that serialises as 'YYYY-MM-DD HH:MM:SS' and stores NULL when unset."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any


@dataclass(frozen=True)
class JSONTime:
    """Wraps a datetime; the minimum datetime stands for 'unset'."""

    time: datetime = datetime.min

    def _is_zero(self) -> bool:
        offset = self.time.utcoffset()
        return self.time.replace(tzinfo=None) == datetime.min and offset in (None, timedelta(0))

    def to_json(self) -> str:
        """Return JSON text: a quoted timestamp, or an empty quoted string when unset."""
        if self._is_zero():
            return '""'
        t = self.time
        return (
            f'"{t.year:04d}-{t.month:02d}-{t.day:02d} '
            f'{t.hour:02d}:{t.minute:02d}:{t.second:02d}"'
        )

    def value(self) -> datetime | None:
        """Return the value to store in a database: None when unset."""
        if self._is_zero():
            return None
        return self.time

    @classmethod
    def scan(cls, value: Any) -> JSONTime:
        """Build from a database value, which must be a datetime."""
        if isinstance(value, datetime):
            return cls(value)
        raise TypeError(f"can not convert {value} to timestamp")