"""Read-only snapshots derived from watcher state."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any


@dataclass(frozen=True)
class MinerStats:
    """Point-in-time view of how far the watcher is behind the chain tip."""

    current_block: int
    last_processed_block: int
    blocks_behind: int
    confirmation_threshold: int

    @classmethod
    def capture(
        cls,
        current_block: int,
        last_processed_block: int,
        confirmation_threshold: int,
    ) -> MinerStats:
        return cls(
            current_block=current_block,
            last_processed_block=last_processed_block,
            blocks_behind=max(0, current_block - last_processed_block),
            confirmation_threshold=confirmation_threshold,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConfirmationRecord:
    """Fields of the structured log record written for a confirmed policy block."""

    block_number: int
    block_hash: str  # 0x-prefixed hex
    timestamp: int
    policy_transactions: int
    confirmation_time: int  # wall clock, seconds since epoch
    confirmation_threshold: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
