"""Data models for the policy_watcher daemon."""

from policy_watcher.models.blocks import BLOCK_HASH_SIZE, Block, PolicyBlock
from policy_watcher.models.config import MinerConfig
from policy_watcher.models.snapshots import ConfirmationRecord, MinerStats

__all__ = [
    "BLOCK_HASH_SIZE", "Block", "PolicyBlock",
    "MinerConfig",
    "ConfirmationRecord", "MinerStats",
]
