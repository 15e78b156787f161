"""ChainClient protocol - reads block data from a blockchain node."""

from __future__ import annotations

from typing import Protocol

from policy_watcher.models.blocks import Block


class ChainClient(Protocol):
    """Fetches the chain tip and individual blocks. No caching."""

    async def current_height(self) -> int:
        """Return the latest block number. Raises TransportError on failure."""
        ...

    async def fetch_block(self, number: int) -> Block | None:
        """Return the block at ``number``, or None if the node has no such block."""
        ...

    async def aclose(self) -> None:
        """Release any pooled connections."""
        ...
