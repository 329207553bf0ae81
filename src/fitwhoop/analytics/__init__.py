"""Scoring engine for daily wearable health data.

Modules:
    weighting   -- Weighted composites that renormalize over present signals
    baseline    -- Personal (mean, SD) baselines from history
    strain      -- Activity-based 0-21 strain and target strain bands
    sleep       -- Main-session sleep performance and stage breakdown
    consistency -- Bed/wake time regularity
    debt        -- Trailing-window sleep debt
    recovery    -- Sleep / HRV / RHR recovery score
    sleep_need  -- Recommended sleep for the coming night
    summary     -- Daily summary aggregation
    pipeline    -- Provider payload bundle -> DailySummary
"""

from fitwhoop.analytics.weighting import WeightedComponent, weighted_score
from fitwhoop.analytics.baseline import Baseline, estimate_baseline
from fitwhoop.analytics.strain import score_strain, target_strain, StrainResult, StrainTarget
from fitwhoop.analytics.sleep import score_sleep, SleepResult, StageHours, Restorative
from fitwhoop.analytics.consistency import score_sleep_consistency
from fitwhoop.analytics.debt import compute_sleep_debt
from fitwhoop.analytics.recovery import score_recovery, recovery_zone, RecoveryResult
from fitwhoop.analytics.sleep_need import estimate_sleep_need, SleepNeed
from fitwhoop.analytics.summary import build_daily_summary, DailySummary

__all__ = [
    # weighting
    "WeightedComponent",
    "weighted_score",
    # baseline
    "Baseline",
    "estimate_baseline",
    # strain
    "score_strain",
    "target_strain",
    "StrainResult",
    "StrainTarget",
    # sleep
    "score_sleep",
    "SleepResult",
    "StageHours",
    "Restorative",
    # consistency
    "score_sleep_consistency",
    # debt
    "compute_sleep_debt",
    # recovery
    "score_recovery",
    "recovery_zone",
    "RecoveryResult",
    # sleep need
    "estimate_sleep_need",
    "SleepNeed",
    # summary
    "build_daily_summary",
    "DailySummary",
]
