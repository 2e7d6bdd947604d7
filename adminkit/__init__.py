"""Request contexts, response envelopes, prefixed adapters, JWT claims and utilities for admin back ends."""

__version__ = "0.1.0"