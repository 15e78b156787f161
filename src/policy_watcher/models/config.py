"""Configuration model for the watcher."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MinerConfig:
    """Complete watcher configuration."""

    rpc_url: str = "http://localhost:8545"
    confirmation_threshold: int = 12  # blocks, advisory (logged only)
    poll_interval: float = 5  # seconds
    rpc_timeout: float = 30.0  # seconds per RPC round trip

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be > 0, got {self.poll_interval}")
        if self.confirmation_threshold < 0:
            raise ValueError(
                f"confirmation_threshold must be >= 0, got {self.confirmation_threshold}"
            )
        if self.rpc_timeout <= 0:
            raise ValueError(f"rpc_timeout must be > 0, got {self.rpc_timeout}")
