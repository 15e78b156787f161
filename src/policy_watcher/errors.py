"""Error types raised by watcher components."""

from __future__ import annotations


class WatcherError(Exception):
    """Base class for policy_watcher errors."""


class TransportError(WatcherError):
    """An RPC call failed or returned data that could not be decoded.

    Recovered by the poll loop: a failed height fetch skips the tick,
    a failed block fetch skips that block.
    """


class ConstructionError(WatcherError):
    """The chain client could not be built from the given endpoint."""
