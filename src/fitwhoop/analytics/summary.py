"""Daily summary aggregator.

Pulls the results of every scorer into a single DailySummary that is
JSON-serializable.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field
from datetime import date
from typing import Any

from fitwhoop.analytics.baseline import Baseline
from fitwhoop.analytics.recovery import RecoveryResult, score_recovery
from fitwhoop.analytics.sleep import SleepResult
from fitwhoop.analytics.sleep_need import SleepNeed, estimate_sleep_need
from fitwhoop.analytics.strain import StrainResult, StrainTarget, score_strain, target_strain


@dataclass(frozen=True)
class DailySummary:
    """A single day's derived health metrics."""

    date: str  # ISO date string, e.g. "2026-02-13"
    strain: StrainResult = field(default_factory=lambda: score_strain(None, None))
    recovery: RecoveryResult = field(default_factory=score_recovery)
    sleep: SleepResult = field(default_factory=SleepResult)
    sleep_debt_hours: float = 0.0
    sleep_consistency: int = 100
    sleep_need: SleepNeed = field(default_factory=lambda: estimate_sleep_need(0.0))
    target_strain: StrainTarget = field(default_factory=lambda: target_strain(0.0))
    hrv_baseline: Baseline | None = None
    rhr_baseline: Baseline | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (JSON-friendly)."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def __repr__(self) -> str:
        return (
            f"DailySummary({self.date}: "
            f"strain={self.strain.score:.1f}/21, "
            f"recovery={self.recovery.score}, "
            f"sleep={self.sleep.score:.0f}, "
            f"need={self.sleep_need.formatted})"
        )


def build_daily_summary(
    day: date | str,
    strain: StrainResult | None = None,
    recovery: RecoveryResult | None = None,
    sleep: SleepResult | None = None,
    sleep_debt_hours: float = 0.0,
    sleep_consistency: int = 100,
    sleep_need: SleepNeed | None = None,
    hrv_baseline: Baseline | None = None,
    rhr_baseline: Baseline | None = None,
) -> DailySummary:
    """Build a daily summary from individual results.

    Missing results are filled with their all-zero variants.  The sleep
    need defaults to one derived from strain and debt, and the target
    strain always follows the recovery score.
    """
    date_str = day if isinstance(day, str) else day.isoformat()

    strain = strain if strain is not None else score_strain(None, None)
    recovery = recovery if recovery is not None else score_recovery()
    if sleep_need is None:
        sleep_need = estimate_sleep_need(strain.score, sleep_debt_hours)

    return DailySummary(
        date=date_str,
        strain=strain,
        recovery=recovery,
        sleep=sleep if sleep is not None else SleepResult(),
        sleep_debt_hours=sleep_debt_hours,
        sleep_consistency=sleep_consistency,
        sleep_need=sleep_need,
        target_strain=target_strain(recovery.score),
        hrv_baseline=hrv_baseline,
        rhr_baseline=rhr_baseline,
    )
