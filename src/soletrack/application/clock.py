"""Wall clock used by handlers; tests pass their own."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Aware time in the host's zone, so days and receipts follow the shop's calendar."""
    return datetime.now().astimezone()
