"""Protocol interfaces for policy_watcher components."""

from policy_watcher.interfaces.chain import ChainClient
from policy_watcher.interfaces.notifier import Notifier

__all__ = [
    "ChainClient",
    "Notifier",
]
