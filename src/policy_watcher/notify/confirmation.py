"""Confirmation notifier - logs a confirmation record and fans out to downstream steps."""

from __future__ import annotations

import logging
import time
from typing import Callable

from policy_watcher.interfaces.notifier import Notifier
from policy_watcher.models.blocks import PolicyBlock
from policy_watcher.models.snapshots import ConfirmationRecord

log = logging.getLogger(__name__)


class ConfirmationNotifier:
    """Confirms policy blocks.

    Writes one structured confirmation record per block, then runs the four
    downstream steps strictly in sequence. Fire-and-forget: nothing is
    acknowledged or recorded as done, so a crash mid-sequence leaves the
    completed steps in place.
    """

    def __init__(
        self,
        steps: Notifier,
        confirmation_threshold: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._steps = steps
        self._threshold = confirmation_threshold
        self._clock = clock

    async def notify(self, block: PolicyBlock) -> ConfirmationRecord:
        record = ConfirmationRecord(
            block_number=block.block_number,
            block_hash=block.block_hash_hex,
            timestamp=block.timestamp,
            policy_transactions=block.policy_count,
            confirmation_time=int(self._clock()),
            confirmation_threshold=self._threshold,
        )

        log.info("=== POLICY BLOCK CONFIRMED ===")
        log.info("Block Number: %d", record.block_number)
        log.info("Block Hash: %s", record.block_hash)
        log.info("Timestamp: %d", record.timestamp)
        log.info("Policy Transactions: %d", record.policy_transactions)
        log.info("Confirmation Time: %d", record.confirmation_time)
        log.info("Confirmation Threshold: %d blocks", record.confirmation_threshold)
        log.info("=============================")

        await self._post_confirmation(block)
        return record

    async def _post_confirmation(self, block: PolicyBlock) -> None:
        log.info("Running post-confirmation processing for block %d", block.block_number)

        await self._steps.update_policy_statuses(block)
        await self._steps.trigger_claim_verification(block)
        await self._steps.update_offchain_databases(block)
        await self._steps.notify_parties(block)

        log.info("Post-confirmation processing completed for block %d", block.block_number)
