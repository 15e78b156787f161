"""Main daemon loop - polls the chain and confirms policy blocks."""

from __future__ import annotations

import asyncio
import logging
import signal

from policy_watcher.chain.client import JsonRpcChainClient
from policy_watcher.errors import TransportError
from policy_watcher.interfaces.chain import ChainClient
from policy_watcher.models.config import MinerConfig
from policy_watcher.models.snapshots import MinerStats
from policy_watcher.notify.confirmation import ConfirmationNotifier
from policy_watcher.notify.simulated import SimulatedNotifier
from policy_watcher.pipeline.classifier import classify
from policy_watcher.pipeline.cursor import CursorTracker

log = logging.getLogger(__name__)


class WatcherDaemon:
    """Block-confirmation watcher.

    One tick fetches the chain height, walks every block after the cursor in
    ascending order, confirms the ones classified as policy blocks, and moves
    the cursor to the end of the range. Blocks that fail to fetch are logged
    and skipped, never retried.
    """

    def __init__(
        self,
        cfg: MinerConfig,
        chain: ChainClient | None = None,
        notifier: ConfirmationNotifier | None = None,
    ) -> None:
        self._cfg = cfg
        self._running = False

        # Raises ConstructionError on a bad endpoint
        self.chain: ChainClient = chain or JsonRpcChainClient(cfg.rpc_url, cfg.rpc_timeout)
        self.notifier = notifier or ConfirmationNotifier(
            SimulatedNotifier(), cfg.confirmation_threshold,
        )
        self.cursor = CursorTracker()

    async def start(self) -> None:
        """Initialize the cursor and run the main loop until stopped."""
        log.info("Starting policy_watcher daemon")
        log.info("  RPC URL: %s", self._cfg.rpc_url)
        log.info("  Confirmation threshold: %d blocks", self._cfg.confirmation_threshold)
        log.info("  Polling interval: %s seconds", self._cfg.poll_interval)

        self._running = True
        try:
            await self._initialize_cursor()
            await self._main_loop()
        finally:
            await self.chain.aclose()
            log.info("Daemon shut down cleanly")

    async def stop(self) -> None:
        """Signal the daemon to stop after the current tick."""
        log.info("Stop requested")
        self._running = False

    async def get_stats(self) -> MinerStats:
        current = await self.chain.current_height()
        return MinerStats.capture(
            current, self.cursor.last_processed_block, self._cfg.confirmation_threshold,
        )

    async def _initialize_cursor(self) -> None:
        """Start from the current chain height, waiting for the node if needed."""
        while self._running:
            try:
                height = await self.chain.current_height()
            except TransportError as exc:
                log.error("Could not get starting block: %s", exc)
                await asyncio.sleep(self._cfg.poll_interval)
                continue
            self.cursor.initialize(height)
            log.info("Starting from block: %d", height)
            return

    async def _main_loop(self) -> None:
        """The core polling loop."""
        while self._running:
            try:
                processed = await self.process_new_blocks()
                if processed > 0:
                    log.info("Processed %d new blocks", processed)
            except asyncio.CancelledError:
                log.info("Main loop cancelled")
                raise
            except TransportError as exc:
                log.error("Error processing blocks: %s", exc)
            except Exception as exc:
                log.error("Unexpected error processing blocks: %s", exc, exc_info=True)

            if self._running:
                await asyncio.sleep(self._cfg.poll_interval)

    async def process_new_blocks(self) -> int:
        """Run one tick. Returns the number of policy blocks confirmed.

        A failed height fetch raises TransportError and leaves the cursor
        untouched.
        """
        current = await self.chain.current_height()

        pending = self.cursor.pending_range(current)
        if pending is None:
            return 0

        log.info("Processing blocks %d to %d", pending.start, pending.stop - 1)

        confirmed = 0
        for number in pending:
            try:
                block = await self.chain.fetch_block(number)
            except TransportError as exc:
                log.warning("Error processing block %d: %s", number, exc)
                continue
            except Exception as exc:
                log.warning("Error processing block %d: %s", number, exc, exc_info=True)
                continue

            if block is None:
                log.warning("Block %d not found", number)
                continue

            policy_block = classify(block)
            if policy_block is None:
                continue

            log.info(
                "Found policy block: number=%d hash=%s txs=%d",
                policy_block.block_number,
                policy_block.block_hash_hex,
                policy_block.policy_count,
            )
            await self.notifier.notify(policy_block)
            confirmed += 1

        self.cursor.advance_to(pending.stop - 1)
        return confirmed


async def run_daemon(cfg: MinerConfig) -> None:
    """Entry point for running the daemon."""
    daemon = WatcherDaemon(cfg)

    try:
        stats = await daemon.get_stats()
        log.info("Initial miner stats: %s", stats)
    except TransportError as exc:
        log.warning("Could not get initial stats: %s", exc)

    loop = asyncio.get_running_loop()

    def _signal_handler():
        asyncio.ensure_future(daemon.stop())

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _signal_handler)
        except NotImplementedError:
            # Windows doesn't support add_signal_handler
            pass

    await daemon.start()
