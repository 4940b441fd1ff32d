"""Clock module for git-diary.

Provides the wall clock used by the pipeline and a fixed clock for tests.
"""

from datetime import datetime

from .clock import Clock, SystemClock
from .mock import FixedClock


def create_clock(fixed: datetime | None = None) -> Clock:
    """Create a clock instance.

    Args:
        fixed: If given, return a clock frozen at this instant

    Returns:
        Clock implementation
    """
    if fixed is not None:
        return FixedClock(fixed)
    return SystemClock()


__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "create_clock",
]
