"""Chain access: JSON-RPC client for Ethereum-style nodes."""

from policy_watcher.chain.client import JsonRpcChainClient

__all__ = ["JsonRpcChainClient"]
