"""
Progress arithmetic for workflow execution.

Coarse progress counts attempted commands; a remote getprogress value can
refine it within the share of the current command.
"""

import math
from collections.abc import Mapping
from typing import Any


def coarse_percent(completed: int, total: int) -> int:
    """floor(completed / total * 100); an empty run counts as complete."""
    if total <= 0:
        return 100
    return (completed * 100) // total


def refined_percent(completed: int, total: int, remote_progress: float) -> int:
    """
    Blend coarse progress with the node's own sub-progress.

    Returns min(100, coarse + floor(remote_progress / total)).
    """
    refined = coarse_percent(completed, total) + int(remote_progress // total)
    return min(100, refined)


def remote_progress(payload: Any) -> float | None:
    """
    Extract a numeric 'progress' field from a getprogress response.

    Anything without one means "no update available".
    """
    if not isinstance(payload, Mapping):
        return None
    value = payload.get("progress")
    # bool is an int subclass but never a meaningful progress value
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if not math.isfinite(value):
        return None
    return float(value)
