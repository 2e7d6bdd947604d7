"""Small general helpers: hashing, ids, paths, base64 and de-duplication."""

from __future__ import annotations

import base64
import hashlib
import os
import time
import uuid
from collections.abc import Iterable


def md5_hex(data: str) -> str:
    """Return the hex MD5 digest of a string."""
    return hashlib.md5(data.encode()).hexdigest()


def is_string_empty(text: str) -> bool:
    """Return True when text holds nothing but spaces."""
    return text.strip(" ") == ""


def get_uuid() -> str:
    """Return a random UUID without dashes."""
    return uuid.uuid4().hex


def path_exists(path: str | os.PathLike) -> bool:
    """Return True when path can be looked up."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def base64_to_image(data: str) -> bytes:
    """Decode standard, padded base64; raise ValueError on malformed input."""
    return base64.b64decode(data, validate=True)


def get_dir_files(directory: str) -> list[str]:
    """List every file below directory, recursively, in name order."""
    entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    files: list[str] = []
    for entry in entries:
        path = directory + os.sep + entry.name
        if entry.is_dir(follow_symlinks=False):
            files.extend(get_dir_files(path))
        else:
            files.append(path)
    return files


def current_timestamp_ms() -> int:
    """Return the current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def remove_duplicates(items: Iterable[str]) -> list[str]:
    """Drop repeated items, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))