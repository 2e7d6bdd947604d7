"""Minimal HTTP GET and JSON POST helpers."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

_POST_TIMEOUT = 5.0


def _fetch(request: urllib.request.Request, timeout: float | None = None) -> bytes:
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        with urllib.request.urlopen(request, **kwargs) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        # Error statuses still carry a body that the caller wants.
        with exc:
            return exc.read()


def http_get(url: str) -> str:
    """Send a GET request and return the response body as text."""
    request = urllib.request.Request(
        url,
        method="GET",
        headers={"Accept": "*/*", "Content-Type": "application/json"},
    )
    return _fetch(request).decode("utf-8", errors="replace")


def http_post(url: str, data: Any, content_type: str) -> bytes:
    """POST data encoded as JSON, with a 5 second timeout, and return the body."""
    body = json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode()
    request = urllib.request.Request(
        url,
        data=body,
        method="POST",
        headers={"Content-Type": content_type},
    )
    return _fetch(request, timeout=_POST_TIMEOUT)