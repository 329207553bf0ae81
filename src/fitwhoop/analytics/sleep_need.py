"""Recommended sleep for the coming night."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fitwhoop.analytics.strain import STRAIN_MAX


DEFAULT_BASELINE_NEED_HOURS = 7.5

# Extra sleep recommended after a maximal (21) strain day
DEFAULT_MAX_STRAIN_BONUS_HOURS = 1.5


@dataclass(frozen=True)
class SleepNeed:
    """Sleep recommendation and how it was built."""

    hours: float
    whole_hours: int
    minutes: int
    formatted: str  # e.g. "9h 30m"
    baseline: float
    strain_load: float
    debt: float

    def __repr__(self) -> str:
        return f"SleepNeed({self.formatted})"


def format_hours(hours: float) -> tuple[int, int, str]:
    """Split decimal hours into (h, m, "Hh Mm")."""
    h = int(math.floor(hours))
    m = int(round((hours - h) * 60))
    if m == 60:
        h, m = h + 1, 0
    return h, m, f"{h}h {m}m"


def estimate_sleep_need(
    strain_score: float,
    sleep_debt: float = 0.0,
    baseline_hours: float = DEFAULT_BASELINE_NEED_HOURS,
    max_strain_bonus: float = DEFAULT_MAX_STRAIN_BONUS_HOURS,
) -> SleepNeed:
    """Recommend tonight's sleep.

    need = baseline + (strain / 21) * max_strain_bonus + debt
    """
    strain_load = (strain_score / STRAIN_MAX) * max_strain_bonus
    total = baseline_hours + strain_load + sleep_debt
    h, m, text = format_hours(total)
    return SleepNeed(
        hours=total,
        whole_hours=h,
        minutes=m,
        formatted=text,
        baseline=baseline_hours,
        strain_load=strain_load,
        debt=sleep_debt,
    )
