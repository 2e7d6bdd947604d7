"""Captcha answer store backed by a cache adapter."""

from __future__ import annotations

import contextlib
from typing import Any


class CacheStore:
    """Keeps captcha answers in a cache for a fixed number of seconds."""

    def __init__(self, cache: Any, expiration: int) -> None:
        self.cache = cache
        self.expiration = expiration

    def set(self, captcha_id: str, value: str) -> None:
        """Store the answer for a captcha id; cache failures are ignored."""
        with contextlib.suppress(Exception):
            self.cache.set(captcha_id, value, self.expiration)

    def get(self, captcha_id: str, clear: bool) -> str:
        """Return the stored answer, or '' when there is none; clear removes it."""
        try:
            value = self.cache.get(captcha_id)
        except Exception:
            return ""
        if clear:
            with contextlib.suppress(Exception):
                self.cache.delete(captcha_id)
        return value

    def verify(self, captcha_id: str, answer: str, clear: bool) -> bool:
        """Return True when answer matches the stored one."""
        return self.get(captcha_id, clear) == answer