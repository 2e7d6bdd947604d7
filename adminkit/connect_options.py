"""Connection options for Redis and NSQ, with optional mutual TLS."""

from __future__ import annotations

import socket
import ssl
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

_redis_client: Any = None


def get_redis_client() -> Any:
    """Return the shared Redis client, or None."""
    return _redis_client


def set_redis_client(client: Any) -> None:
    """Replace the shared Redis client, shutting down a different previous one."""
    global _redis_client
    if _redis_client is not None and _redis_client is not client:
        _redis_client.shutdown()
    _redis_client = client


@dataclass
class TlsConfig:
    """Paths of the certificate, its key and the CA bundle."""

    cert: str = ""
    key: str = ""
    ca: str = ""


def build_tls_context(tls: TlsConfig | None) -> ssl.SSLContext | None:
    """Build a context that presents cert and requires client certificates signed by ca.

    Returns None when no certificate is configured or the CA file holds no certificates.
    """
    if tls is None or not tls.cert:
        return None
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.load_cert_chain(tls.cert, tls.key or None)
    with open(tls.ca, encoding="ascii", errors="replace") as fh:
        ca_data = fh.read()
    try:
        context.load_verify_locations(cadata=ca_data)
    except ssl.SSLError:
        return None
    context.verify_mode = ssl.CERT_REQUIRED
    return context


@dataclass
class RedisConnectOptions:
    network: str = ""
    addr: str = ""
    username: str = ""
    password: str = ""
    db: int = 0
    pool_size: int = 0
    tls: TlsConfig | None = None
    max_retries: int = 0

    def redis_options(self) -> dict[str, Any]:
        """Return the keyword options for a Redis client."""
        return {
            "network": self.network,
            "addr": self.addr,
            "username": self.username,
            "password": self.password,
            "db": self.db,
            "max_retries": self.max_retries,
            "pool_size": self.pool_size,
            "tls_config": build_tls_context(self.tls),
        }


def _nsq_defaults() -> dict[str, Any]:
    hostname = socket.gethostname()
    return {
        "dial_timeout": timedelta(seconds=1),
        "read_timeout": timedelta(seconds=60),
        "write_timeout": timedelta(seconds=1),
        "lookupd_poll_interval": timedelta(seconds=60),
        "lookupd_poll_jitter": 0.3,
        "max_requeue_delay": timedelta(minutes=15),
        "default_requeue_delay": timedelta(seconds=90),
        "max_backoff_duration": timedelta(minutes=2),
        "backoff_multiplier": timedelta(seconds=1),
        "max_attempts": 5,
        "low_rdy_idle_timeout": timedelta(seconds=10),
        "low_rdy_timeout": timedelta(seconds=30),
        "rdy_redistribute_interval": timedelta(seconds=5),
        "client_id": hostname.split(".")[0],
        "hostname": hostname,
        "user_agent": "adminkit",
        "heartbeat_interval": timedelta(seconds=30),
        "sample_rate": 0,
        "tls_config": None,
        "deflate": False,
        "deflate_level": 6,
        "snappy": False,
        "output_buffer_size": 16384,
        "output_buffer_timeout": timedelta(milliseconds=250),
        "max_in_flight": 1,
        "msg_timeout": timedelta(0),
        "auth_secret": "",
    }


_SECONDS_FIELDS = (
    "dial_timeout",
    "read_timeout",
    "write_timeout",
    "lookupd_poll_interval",
    "max_requeue_delay",
    "default_requeue_delay",
    "backoff_multiplier",
    "low_rdy_idle_timeout",
    "low_rdy_timeout",
    "rdy_redistribute_interval",
    "heartbeat_interval",
    "output_buffer_timeout",
    "msg_timeout",
)


@dataclass
class NSQOptions:
    """NSQ settings; durations are in seconds, max_backoff_duration in milliseconds."""

    dial_timeout: float = 0
    read_timeout: float = 0
    write_timeout: float = 0
    addresses: list[str] = field(default_factory=list)
    lookupd_poll_interval: float = 0
    lookupd_poll_jitter: float = 0
    max_requeue_delay: float = 0
    default_requeue_delay: float = 0
    max_backoff_duration: float = 0
    backoff_multiplier: float = 0
    max_attempts: int = 0
    low_rdy_idle_timeout: float = 0
    low_rdy_timeout: float = 0
    rdy_redistribute_interval: float = 0
    client_id: str = ""
    hostname: str = ""
    user_agent: str = ""
    heartbeat_interval: float = 0
    sample_rate: int = 0
    tls: TlsConfig | None = None
    deflate: bool = False
    deflate_level: int = 0
    snappy: bool = False
    output_buffer_size: int = 0
    output_buffer_timeout: float = 0
    max_in_flight: int = 0
    msg_timeout: float = 0
    auth_secret: str = ""

    def nsq_config(self) -> dict[str, Any]:
        """Return the client configuration: defaults overridden by the set options."""
        cfg = _nsq_defaults()
        cfg["tls_config"] = build_tls_context(self.tls)
        for name in _SECONDS_FIELDS:
            value = getattr(self, name)
            if value > 0:
                cfg[name] = timedelta(seconds=value)
        if self.max_backoff_duration > 0:
            cfg["max_backoff_duration"] = timedelta(milliseconds=self.max_backoff_duration)
        if self.lookupd_poll_jitter > 0:
            cfg["lookupd_poll_jitter"] = self.lookupd_poll_jitter
        cfg["max_attempts"] = self.max_attempts
        for name in ("client_id", "hostname", "user_agent", "auth_secret"):
            if getattr(self, name):
                cfg[name] = getattr(self, name)
        if self.sample_rate > 0:
            cfg["sample_rate"] = self.sample_rate
        cfg["deflate"] = self.deflate
        if 6 <= self.deflate_level <= 9:
            cfg["deflate_level"] = self.deflate_level
        cfg["snappy"] = self.snappy
        if self.output_buffer_size > 0:
            cfg["output_buffer_size"] = self.output_buffer_size
        if self.max_in_flight > 0:
            cfg["max_in_flight"] = self.max_in_flight
        return cfg