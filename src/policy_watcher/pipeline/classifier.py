"""Block classifier - decides whether a block carries policy activity."""

from __future__ import annotations

from policy_watcher.models.blocks import Block, PolicyBlock


def classify(block: Block) -> PolicyBlock | None:
    """Classify a fetched block.

    Any block with at least one transaction is treated as a policy block and
    its full transaction count is reported as the policy count. This is a
    coarse heuristic: transaction payloads are not inspected.

    Returns None for blocks with no transactions.
    """
    policy_count = len(block.transactions)
    if policy_count == 0:
        return None

    return PolicyBlock(
        block_number=block.number,
        block_hash=block.hash,
        timestamp=block.timestamp,
        policy_count=policy_count,
    )
