"""Configuration loading: defaults + explicit overrides (from the CLI)."""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any

from policy_watcher.models.config import MinerConfig


def load_config(**overrides: Any) -> MinerConfig:
    """Build a validated MinerConfig.

    Overrides whose value is None are ignored so callers can pass optional
    CLI values straight through. Unknown keys raise TypeError.

    Raises:
        ValueError: if the resulting configuration violates an invariant
            (e.g. poll_interval <= 0).
    """
    known = {f.name for f in fields(MinerConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"unknown config option(s): {', '.join(sorted(unknown))}")

    cfg = MinerConfig()
    changes = {k: v for k, v in overrides.items() if v is not None}
    if "rpc_url" in changes:
        changes["rpc_url"] = str(changes["rpc_url"]).strip()
    return replace(cfg, **changes)
