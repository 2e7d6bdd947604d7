"""Base for business services: database handle, logger, cache and collected errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class _CombinedError(Exception):
    """Several errors reported together, the latest one as the cause."""


@dataclass
class Service:
    """State shared by a service's operations."""

    orm: Any = None
    msg: str = ""
    msg_id: str = ""
    log: Any = None
    error: BaseException | None = None
    cache: Any = None

    def add_error(self, err: BaseException | None) -> BaseException | None:
        """Record err alongside earlier errors and return the combined error."""
        if self.error is None:
            self.error = err
        elif err is not None:
            combined = _CombinedError(f"{self.error}; {err}")
            combined.__cause__ = err
            self.error = combined
        return self.error