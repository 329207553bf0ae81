"""Accumulated sleep debt over a trailing window.

Each of the most recent sessions contributes ``need - slept`` hours:
positive when short, negative when the wearer slept past their need.  A
nap or a night split across two logs is its own session.  The running
total is clamped only once, at the end, to ``[0, cap]``.  Extra sleep can
pay debt down to zero but never builds credit, and a terrible week still
counts for at most ``cap`` hours.
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

import numpy as np

from fitwhoop.records import SleepSession


DEFAULT_NEED_HOURS = 8.0
DEFAULT_DEBT_WINDOW = 7  # sessions
DEFAULT_DEBT_CAP_HOURS = 2.0


def _start_key(session: SleepSession) -> str:
    start = session.start_time
    if isinstance(start, datetime):
        return start.isoformat()
    return str(start or "")


def recent_sessions(history: Sequence[SleepSession], window: int) -> list[SleepSession]:
    """The *window* most recent sessions by date then start time, oldest first."""
    if window <= 0:
        return []
    ordered = sorted(history, key=lambda s: (s.date, _start_key(s)))
    return ordered[-window:]


def compute_sleep_debt(
    history: Sequence[SleepSession] | None,
    need_hours: float = DEFAULT_NEED_HOURS,
    window: int = DEFAULT_DEBT_WINDOW,
    cap_hours: float = DEFAULT_DEBT_CAP_HOURS,
) -> float:
    """Compute sleep debt in hours.

    Args:
        history: Sleep sessions in any order, naps included.
        need_hours: Sleep need per session.
        window: Number of most recent sessions to include.
        cap_hours: Upper bound on the reported debt.

    Returns:
        Debt in hours, within ``[0, cap_hours]``, rounded to 0.1.
    """
    if not history or window <= 0:
        return 0.0

    total = sum(
        need_hours - max(float(s.minutes_asleep), 0.0) / 60.0
        for s in recent_sessions(history, window)
    )

    return round(float(np.clip(total, 0.0, max(cap_hours, 0.0))), 1)
