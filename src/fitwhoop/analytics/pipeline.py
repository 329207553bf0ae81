"""Analytics pipeline: wire provider payloads into the scoring engine.

This module consumes a *bundle*: a dict of raw provider payloads for one
day, every key optional::

    {
        "date": "2026-02-13",
        "heart_rate": {...},          # activities-heart, that day
        "heart_rate_history": {...},  # activities-heart, ~30 days
        "activity": {...},
        "sleep": {...},               # that night's sleep log
        "sleep_history": {...},       # ~7-30 nights
        "hrv": {...},
        "hrv_history": {...},
        "spo2": {...},
        "breathing_rate": {...},
        "skin_temp": {...},
    }

It parses what is present, runs every scorer and returns a
:class:`DailySummary`.  A missing or unreadable payload simply leaves the
corresponding input absent.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Protocol, Sequence, TypeVar

from fitwhoop import parsers
from fitwhoop.records import DailyInputs, SleepSession
from fitwhoop.analytics.baseline import estimate_baseline
from fitwhoop.analytics.consistency import score_sleep_consistency
from fitwhoop.analytics.debt import (
    DEFAULT_DEBT_CAP_HOURS,
    DEFAULT_DEBT_WINDOW,
    DEFAULT_NEED_HOURS,
    compute_sleep_debt,
)
from fitwhoop.analytics.recovery import score_recovery
from fitwhoop.analytics.sleep import score_sleep
from fitwhoop.analytics.sleep_need import DEFAULT_BASELINE_NEED_HOURS, estimate_sleep_need
from fitwhoop.analytics.strain import DEFAULT_MAX_HR, score_strain
from fitwhoop.analytics.summary import DailySummary, build_daily_summary

logger = logging.getLogger(__name__)


class _Dated(Protocol):
    date: date


T = TypeVar("T", bound=_Dated)


def _for_day(samples: Sequence[T], day: date) -> T | None:
    """Pick the sample for *day*, else the one for the day before."""
    for target in (day, day - timedelta(days=1)):
        matches = [s for s in samples if s.date == target]
        if matches:
            return matches[-1]
    return None


def _merge_sessions(
    history: Sequence[SleepSession],
    extra: Sequence[SleepSession],
) -> tuple[SleepSession, ...]:
    seen = {(s.date, str(s.start_time)) for s in history}
    merged = list(history)
    for s in extra:
        if (s.date, str(s.start_time)) not in seen:
            merged.append(s)
    return tuple(merged)


def _resolve_day(bundle: dict[str, Any], day_override: date | str | None) -> date:
    if day_override:
        return parsers.parse_date(day_override)
    if bundle.get("date"):
        return parsers.parse_date(bundle["date"])
    sessions = parsers.parse_sleep(bundle.get("sleep"))
    if sessions:
        return sessions[0].date
    hr = parsers.parse_heart_rate(bundle.get("heart_rate"))
    if hr is not None:
        return hr.date
    return date.today()


def collect_inputs(
    bundle: dict[str, Any],
    day_override: date | str | None = None,
) -> DailyInputs:
    """Parse a payload bundle into typed inputs for one day."""
    day = _resolve_day(bundle, day_override)

    hr_history = parsers.parse_heart_rate_series(bundle.get("heart_rate_history"))
    heart_rate = parsers.parse_heart_rate(bundle.get("heart_rate"))
    if heart_rate is None:
        heart_rate = next((r for r in hr_history if r.date == day), None)

    # Sleep for the day; fall back to the night before, as the provider
    # may not have closed today's log yet.
    night = parsers.parse_sleep(bundle.get("sleep"))
    history = parsers.parse_sleep(bundle.get("sleep_history"))
    if not night:
        night = [s for s in history if s.date == day]
    if not night:
        yesterday = day - timedelta(days=1)
        night = [s for s in history if s.date == yesterday]

    hrv_history = parsers.parse_hrv(bundle.get("hrv_history"))
    hrv_today = parsers.parse_hrv(bundle.get("hrv")) or [s for s in hrv_history if s.date == day]

    return DailyInputs(
        date=day,
        heart_rate=heart_rate,
        activity=parsers.parse_activity_summary(bundle.get("activity"), day),
        sleep_history=_merge_sessions(history, night),
        night=tuple(night),
        hrv=_for_day(hrv_today, day),
        spo2=_for_day(parsers.parse_spo2_series(bundle.get("spo2")), day),
        breathing_rate=_for_day(parsers.parse_breathing_rate(bundle.get("breathing_rate")), day),
        skin_temp=_for_day(parsers.parse_skin_temp(bundle.get("skin_temp")), day),
        hrv_history=tuple(hrv_history),
        heart_rate_history=tuple(hr_history),
    )


def score_day(
    inputs: DailyInputs,
    max_hr: float = DEFAULT_MAX_HR,
    debt_need_hours: float = DEFAULT_NEED_HOURS,
    debt_window: int = DEFAULT_DEBT_WINDOW,
    debt_cap_hours: float = DEFAULT_DEBT_CAP_HOURS,
    baseline_need_hours: float = DEFAULT_BASELINE_NEED_HOURS,
) -> DailySummary:
    """Run every scorer over one day's inputs."""
    day = inputs.date
    for name in ("heart_rate", "activity", "hrv", "spo2", "breathing_rate", "skin_temp"):
        if getattr(inputs, name) is None:
            logger.debug("%s: no %s input", day, name)

    strain = score_strain(inputs.heart_rate, inputs.activity, max_hr=max_hr)
    sleep = score_sleep(inputs.night)

    # Baselines come from prior days only
    hrv_baseline = estimate_baseline(
        s.daily_rmssd_ms for s in inputs.hrv_history if s.date != day
    )
    rhr_baseline = estimate_baseline(
        r.resting_heart_rate_bpm for r in inputs.heart_rate_history if r.date != day
    )

    recovery = score_recovery(
        sleep_efficiency=sleep.score,
        hrv_ms=inputs.hrv.daily_rmssd_ms if inputs.hrv else None,
        resting_hr=inputs.heart_rate.resting_heart_rate_bpm if inputs.heart_rate else None,
        spo2_pct=inputs.spo2.avg_percent if inputs.spo2 else None,
        respiratory_rate=inputs.breathing_rate.breaths_per_minute if inputs.breathing_rate else None,
        skin_temp_deviation=inputs.skin_temp.nightly_relative_c if inputs.skin_temp else None,
        hrv_baseline=hrv_baseline,
        rhr_baseline=rhr_baseline,
    )

    debt = compute_sleep_debt(
        inputs.sleep_history,
        need_hours=debt_need_hours,
        window=debt_window,
        cap_hours=debt_cap_hours,
    )
    consistency = score_sleep_consistency(inputs.sleep_history)
    need = estimate_sleep_need(strain.score, debt, baseline_hours=baseline_need_hours)

    return build_daily_summary(
        day=day,
        strain=strain,
        recovery=recovery,
        sleep=sleep,
        sleep_debt_hours=debt,
        sleep_consistency=consistency,
        sleep_need=need,
        hrv_baseline=hrv_baseline,
        rhr_baseline=rhr_baseline,
    )


def run_pipeline(
    bundle: dict[str, Any],
    max_hr: float = DEFAULT_MAX_HR,
    debt_cap_hours: float = DEFAULT_DEBT_CAP_HOURS,
    baseline_need_hours: float = DEFAULT_BASELINE_NEED_HOURS,
    day_override: date | str | None = None,
) -> DailySummary:
    """Run the full analytics pipeline on a payload bundle.

    Args:
        bundle: Dict of raw provider payloads (see module docstring).
        max_hr: User's max heart rate.
        debt_cap_hours: Upper bound on sleep debt.
        baseline_need_hours: Baseline nightly sleep need for the
            sleep-need recommendation.
        day_override: Override the date (default: bundle "date", else today).

    Returns:
        A populated DailySummary.
    """
    inputs = collect_inputs(bundle, day_override)
    return score_day(
        inputs,
        max_hr=max_hr,
        debt_cap_hours=debt_cap_hours,
        baseline_need_hours=baseline_need_hours,
    )
