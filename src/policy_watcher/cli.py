"""CLI entry point for the policy_watcher daemon."""

from __future__ import annotations

import asyncio
import logging
import os
import sys

import click

from policy_watcher import __version__
from policy_watcher.config import load_config
from policy_watcher.daemon import run_daemon
from policy_watcher.errors import ConstructionError

LOG_LEVEL_ENV = "POLICY_WATCHER_LOG_LEVEL"


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.command()
@click.option(
    "-r", "--rpc-url", default="http://localhost:8545", show_default=True,
    help="Ethereum RPC URL",
)
@click.option(
    "-c", "--confirmation-threshold", default=12, show_default=True,
    type=click.IntRange(min=0), help="Block confirmation threshold (logged only)",
)
@click.option(
    "-p", "--poll-interval", default=5, show_default=True,
    type=click.IntRange(min=1), help="Polling interval in seconds",
)
@click.version_option(__version__, prog_name="policy-watcher")
def main(rpc_url: str, confirmation_threshold: int, poll_interval: int) -> None:
    """policy-watcher - confirms policy blocks on an Ethereum private chain."""
    _configure_logging()

    cfg = load_config(
        rpc_url=rpc_url,
        confirmation_threshold=confirmation_threshold,
        poll_interval=poll_interval,
    )

    try:
        asyncio.run(run_daemon(cfg))
    except ConstructionError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
