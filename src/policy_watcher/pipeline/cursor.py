"""Cursor tracker - the last fully processed block number."""

from __future__ import annotations


class CursorTracker:
    """Holds the watcher's position and computes the next range to scan.

    Blocks that fail during a scan are not retried: ``advance_to`` moves
    the cursor past the whole range regardless.
    """

    def __init__(self) -> None:
        self._last_processed: int = 0
        self._initialized = False

    @property
    def last_processed_block(self) -> int:
        return self._last_processed

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self, height: int) -> None:
        """Start from the chain's current height; earlier blocks are never scanned."""
        self._last_processed = height
        self._initialized = True

    def pending_range(self, current_height: int) -> range | None:
        """Block numbers after the cursor up to and including ``current_height``."""
        if current_height <= self._last_processed:
            return None
        return range(self._last_processed + 1, current_height + 1)

    def advance_to(self, end: int) -> None:
        self._last_processed = end
