"""policy_watcher - block-confirmation watcher for policy blocks."""

__version__ = "0.1.0"
