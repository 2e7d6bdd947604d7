"""Table sharding by CRC32 of a field value."""

from __future__ import annotations

import zlib
from collections.abc import Callable
from typing import Any


def _crc_bucket(src: str, buckets: int) -> str:
    return str(zlib.crc32(src.encode()) % buckets)


def crc32_hash(src: str) -> str:
    """Return the shard number out of 32 tables."""
    return _crc_bucket(src, 32)


def crc16_hash(src: str) -> str:
    """Return the shard number out of 16 tables."""
    return _crc_bucket(src, 16)


def crc8_hash(src: str) -> str:
    """Return the shard number out of 8 tables."""
    return _crc_bucket(src, 8)


def dynamic_table(
    func: Callable[[str], str], base_table: str, field_value: str
) -> Callable[[Any], Any]:
    """Return a scope that points a query builder at base_table_<shard>."""

    def scope(db: Any) -> Any:
        return db.table(f"{base_table}_{func(field_value)}")

    return scope