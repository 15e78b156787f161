"""Confirmation notification for policy blocks."""

from policy_watcher.notify.confirmation import ConfirmationNotifier
from policy_watcher.notify.simulated import SimulatedNotifier, StepDelays

__all__ = ["ConfirmationNotifier", "SimulatedNotifier", "StepDelays"]
