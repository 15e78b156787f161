"""Simulated downstream notifier - each step is a bounded delay."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from policy_watcher.models.blocks import PolicyBlock

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepDelays:
    """Seconds each simulated step sleeps."""

    policy_statuses: float = 0.100
    claim_verification: float = 0.150
    offchain_databases: float = 0.200
    notify_parties: float = 0.100


class SimulatedNotifier:
    """Implements the Notifier protocol with sleeps standing in for real calls."""

    def __init__(self, delays: StepDelays | None = None) -> None:
        self._delays = delays or StepDelays()

    async def update_policy_statuses(self, block: PolicyBlock) -> None:
        log.info("  - Updating policy statuses")
        await asyncio.sleep(self._delays.policy_statuses)

    async def trigger_claim_verification(self, block: PolicyBlock) -> None:
        log.info("  - Triggering claim verification processes")
        await asyncio.sleep(self._delays.claim_verification)

    async def update_offchain_databases(self, block: PolicyBlock) -> None:
        log.info("  - Updating off-chain databases")
        await asyncio.sleep(self._delays.offchain_databases)

    async def notify_parties(self, block: PolicyBlock) -> None:
        log.info("  - Notifying relevant parties")
        await asyncio.sleep(self._delays.notify_parties)
