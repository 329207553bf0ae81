"""Strain scoring from daily activity totals.

The provider does not expose a strain metric, so strain is approximated
from active minutes and calories burned and mapped onto the 0-21 scale:

    strain = (active_min / 60) * 4 + (calories / 2000) * 6

where ``active_min`` is very-active plus fairly-active minutes.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from fitwhoop.records import ActivitySummary, DailyHeartRateRecord, HeartRateZoneSample


# Strain ceiling
STRAIN_MAX = 21.0

# Contribution scales: one hour of activity and 2000 kcal
STRAIN_PER_ACTIVE_HOUR = 4.0
STRAIN_PER_CALORIE_UNIT = 6.0
CALORIE_UNIT = 2000.0

# Used when the caller has no personalized max HR
DEFAULT_MAX_HR = 190.0


@dataclass(frozen=True)
class StrainResult:
    """Strain score and the day's activity breakdown."""

    score: float  # 0-21
    active_hours: float
    calories: float
    average_heart_rate_bpm: float  # resting HR stands in for a true average
    max_heart_rate_bpm: float
    zones: tuple[HeartRateZoneSample, ...] = ()

    def __repr__(self) -> str:
        return (
            f"StrainResult(score={self.score:.1f}/21, "
            f"active={self.active_hours:.1f}h, "
            f"cal={self.calories:.0f})"
        )


@dataclass(frozen=True)
class StrainTarget:
    """Recommended strain band for the day."""

    min: float
    max: float
    label: str


def _empty_result() -> StrainResult:
    return StrainResult(
        score=0.0,
        active_hours=0.0,
        calories=0.0,
        average_heart_rate_bpm=0.0,
        max_heart_rate_bpm=0.0,
        zones=(),
    )


def score_strain(
    heart_rate: DailyHeartRateRecord | None,
    activity: ActivitySummary | None,
    max_hr: float | None = None,
) -> StrainResult:
    """Compute the day's strain.

    Args:
        heart_rate: The day's heart rate record (resting HR, zones).
        activity: The day's activity summary.
        max_hr: Personalized max HR; defaults to :data:`DEFAULT_MAX_HR`.

    Returns:
        StrainResult.  If either input is missing, every field is zero.
    """
    if heart_rate is None or activity is None:
        return _empty_result()

    active_min = activity.very_active_minutes + activity.fairly_active_minutes
    raw = (
        (active_min / 60.0) * STRAIN_PER_ACTIVE_HOUR
        + (activity.calories_out / CALORIE_UNIT) * STRAIN_PER_CALORIE_UNIT
    )
    score = float(np.clip(raw, 0.0, STRAIN_MAX))

    active_hours = (active_min + activity.lightly_active_minutes) / 60.0

    return StrainResult(
        score=round(score, 1),
        active_hours=round(active_hours, 1),
        calories=float(activity.calories_out),
        average_heart_rate_bpm=float(heart_rate.resting_heart_rate_bpm or 0.0),
        max_heart_rate_bpm=float(max_hr) if max_hr else DEFAULT_MAX_HR,
        zones=tuple(heart_rate.zones),
    )


# ---------------------------------------------------------------------------
# Target strain from recovery
# ---------------------------------------------------------------------------

# (min recovery, strain band)
TARGET_BANDS = [
    (67.0, StrainTarget(14.0, 18.0, "High Strain")),
    (34.0, StrainTarget(10.0, 14.0, "Moderate Strain")),
]
REST_TARGET = StrainTarget(0.0, 10.0, "Rest / Active Recovery")


def target_strain(recovery_score: float) -> StrainTarget:
    """Suggest a strain band for a given recovery score."""
    for threshold, band in TARGET_BANDS:
        if recovery_score >= threshold:
            return band
    return REST_TARGET
