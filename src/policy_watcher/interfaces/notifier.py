"""Notifier protocol - downstream side effects for a confirmed policy block."""

from __future__ import annotations

from typing import Protocol

from policy_watcher.models.blocks import PolicyBlock


class Notifier(Protocol):
    """One method per downstream step, called in declaration order."""

    async def update_policy_statuses(self, block: PolicyBlock) -> None:
        ...

    async def trigger_claim_verification(self, block: PolicyBlock) -> None:
        ...

    async def update_offchain_databases(self, block: PolicyBlock) -> None:
        ...

    async def notify_parties(self, block: PolicyBlock) -> None:
        ...
