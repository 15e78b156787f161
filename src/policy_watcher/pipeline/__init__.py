"""Block tracking: classification and cursor."""

from policy_watcher.pipeline.classifier import classify
from policy_watcher.pipeline.cursor import CursorTracker

__all__ = ["classify", "CursorTracker"]
