"""Recovery score computation.

Recovery blends three signals, each normalized to 0-100:

- sleep performance (session efficiency), weight 0.4
- heart rate variability (nightly RMSSD), weight 0.4
- resting heart rate (lower is better), weight 0.2

A signal that is missing (absent or zero) drops out and the remaining
weights are renormalized.  HRV and RHR are judged against the wearer's
own baseline when one is available.  Without one, fixed reference points
are used.  SpO2, respiratory rate and skin temperature are reported
alongside but do not move the score.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from fitwhoop.analytics.baseline import Baseline
from fitwhoop.analytics.weighting import WeightedComponent, weighted_score


# ---------------------------------------------------------------------------
# Weights / reference points
# ---------------------------------------------------------------------------

W_SLEEP = 0.4
W_HRV = 0.4
W_RHR = 0.2

# Static fallbacks when no personal baseline exists
HRV_REFERENCE_MS = 80.0  # RMSSD at or above this scores 100
RHR_REFERENCE_BPM = 40.0  # RHR at or below this scores 100

# Recovery colour zones
ZONE_GREEN = 67.0
ZONE_YELLOW = 34.0


@dataclass(frozen=True)
class RecoveryResult:
    """Recovery score, its inputs and the component breakdown."""

    score: int  # 0-100
    hrv: float  # ms, 0 if absent
    resting_heart_rate: float  # bpm, 0 if absent
    respiratory_rate: float  # breaths/min, 0 if absent
    spo2: float  # %, 0 if absent
    skin_temp_deviation: float  # degrees C vs personal baseline, 0 if absent
    baselines_used: dict[str, bool] = field(default_factory=dict)
    breakdown: dict[str, float | None] = field(default_factory=dict)
    zone: str = "red"

    def __repr__(self) -> str:
        return (
            f"RecoveryResult(score={self.score}, "
            f"hrv={self.hrv:.1f}ms, "
            f"rhr={self.resting_heart_rate:.0f}bpm, "
            f"zone={self.zone})"
        )


def _clamp_pct(value: float) -> float:
    return float(np.clip(value, 0.0, 100.0))


def hrv_component(hrv_ms: float, baseline: Baseline | None = None) -> float:
    """Normalize HRV to 0-100 (higher HRV is better).

    With a baseline, anything at or above ``mean - sd`` is 100, falling
    linearly to 0 at ``mean - 3 sd``.
    """
    if baseline is None:
        return _clamp_pct(hrv_ms / HRV_REFERENCE_MS * 100.0)

    upper = baseline.mean - baseline.std_dev
    if hrv_ms >= upper:
        return 100.0
    lower = baseline.mean - 3.0 * baseline.std_dev
    span = upper - lower
    if span <= 0:
        return 0.0
    return _clamp_pct((hrv_ms - lower) / span * 100.0)


def rhr_component(rhr_bpm: float, baseline: Baseline | None = None) -> float:
    """Normalize resting HR to 0-100 (lower RHR is better).

    With a baseline, anything at or below ``mean + sd`` is 100, falling
    linearly to 0 at ``mean + 3 sd``.
    """
    if baseline is None:
        return _clamp_pct(100.0 - (rhr_bpm - RHR_REFERENCE_BPM))

    lower = baseline.mean + baseline.std_dev
    if rhr_bpm <= lower:
        return 100.0
    upper = baseline.mean + 3.0 * baseline.std_dev
    span = upper - lower
    if span <= 0:
        return 0.0
    return _clamp_pct((upper - rhr_bpm) / span * 100.0)


def recovery_zone(score: float) -> str:
    """Map a recovery score to ``green`` / ``yellow`` / ``red``."""
    if score >= ZONE_GREEN:
        return "green"
    if score >= ZONE_YELLOW:
        return "yellow"
    return "red"


def _value(x: float | None) -> float:
    return float(x) if x is not None else 0.0


def score_recovery(
    sleep_efficiency: float | None = None,
    hrv_ms: float | None = None,
    resting_hr: float | None = None,
    spo2_pct: float | None = None,
    respiratory_rate: float | None = None,
    skin_temp_deviation: float | None = None,
    hrv_baseline: Baseline | None = None,
    rhr_baseline: Baseline | None = None,
) -> RecoveryResult:
    """Compute the recovery score.

    Args:
        sleep_efficiency: Main sleep efficiency (0-100), e.g.
            ``SleepResult.score``.
        hrv_ms: Nightly RMSSD in ms.
        resting_hr: Resting heart rate in bpm.
        spo2_pct: Nightly average SpO2 (informational).
        respiratory_rate: Breaths per minute (informational).
        skin_temp_deviation: Nightly relative skin temperature (informational).
        hrv_baseline: Personal HRV baseline, if one could be built.
        rhr_baseline: Personal RHR baseline, if one could be built.

    Returns:
        RecoveryResult.  With no usable signal the score is 0.
    """
    sleep = _value(sleep_efficiency)
    hrv = _value(hrv_ms)
    rhr = _value(resting_hr)

    components = [
        WeightedComponent.from_raw("sleep", W_SLEEP, sleep, _clamp_pct(sleep)),
        WeightedComponent.from_raw(
            "hrv", W_HRV, hrv, hrv_component(hrv, hrv_baseline) if hrv > 0 else 0.0,
        ),
        WeightedComponent.from_raw(
            "rhr", W_RHR, rhr, rhr_component(rhr, rhr_baseline) if rhr > 0 else 0.0,
        ),
    ]

    composite = weighted_score(components)
    score = int(round(_clamp_pct(composite))) if composite is not None else 0

    return RecoveryResult(
        score=score,
        hrv=hrv,
        resting_heart_rate=rhr,
        respiratory_rate=_value(respiratory_rate),
        spo2=_value(spo2_pct),
        skin_temp_deviation=_value(skin_temp_deviation),
        baselines_used={
            "hrv": hrv_baseline is not None,
            "rhr": rhr_baseline is not None,
        },
        breakdown={
            f"{c.name}_component": round(c.value, 1) if c.present else None
            for c in components
        },
        zone=recovery_zone(score),
    )
