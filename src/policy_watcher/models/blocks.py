"""Block data as returned by the chain client, and classified policy blocks."""

from __future__ import annotations

from dataclasses import dataclass

BLOCK_HASH_SIZE = 32


@dataclass(frozen=True)
class Block:
    """A block header plus its transaction hashes (eth_getBlockByNumber, non-full)."""

    number: int
    hash: bytes  # 32 bytes
    timestamp: int  # seconds since epoch
    transactions: tuple[str, ...] = ()


@dataclass(frozen=True)
class PolicyBlock:
    """A block classified as carrying policy activity.

    Built once per classified block and handed to the notifier by value.
    """

    block_number: int
    block_hash: bytes
    timestamp: int
    policy_count: int  # >= 1

    @property
    def block_hash_hex(self) -> str:
        return "0x" + self.block_hash.hex()
