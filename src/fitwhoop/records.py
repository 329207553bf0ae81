"""Parsed daily records consumed by the analytics engine.

These are the shapes the scorers accept.  They are produced by
:mod:`fitwhoop.parsers` from provider payloads, or built directly by a
caller.  Every field that a provider may omit has an explicit default:

- activity minutes / calories / steps default to 0
- resting heart rate defaults to ``None`` (absent, not zero)
- sleep stages default to ``None`` (no breakdown reported)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Union


# ---------------------------------------------------------------------------
# Heart rate / activity
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HeartRateZoneSample:
    """Minutes spent inside one provider-defined HR zone."""

    name: str
    min_bpm: float
    max_bpm: float
    minutes_in_zone: float = 0.0


@dataclass(frozen=True)
class DailyHeartRateRecord:
    """One day of heart rate data: resting HR plus zone minutes."""

    date: date
    resting_heart_rate_bpm: float | None = None
    zones: tuple[HeartRateZoneSample, ...] = ()


@dataclass(frozen=True)
class ActivitySummary:
    """One day's activity totals."""

    date: date
    very_active_minutes: float = 0.0
    fairly_active_minutes: float = 0.0
    lightly_active_minutes: float = 0.0
    calories_out: float = 0.0
    steps: int = 0


# ---------------------------------------------------------------------------
# Sleep
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StageModel:
    """Four-stage breakdown (deep / light / REM / wake), in minutes."""

    deep_minutes: float = 0.0
    light_minutes: float = 0.0
    rem_minutes: float = 0.0
    wake_minutes: float = 0.0


@dataclass(frozen=True)
class ClassicModel:
    """Legacy three-state breakdown (asleep / restless / awake), in minutes."""

    asleep_minutes: float = 0.0
    restless_minutes: float = 0.0
    awake_minutes: float = 0.0


SleepStageBreakdown = Union[StageModel, ClassicModel]


@dataclass(frozen=True)
class SleepSession:
    """A single sleep log.

    ``start_time`` / ``end_time`` may be raw ISO strings as delivered by the
    provider; they are only parsed where wall-clock times are needed.
    """

    date: date
    start_time: datetime | str | None = None
    end_time: datetime | str | None = None
    minutes_asleep: float = 0.0
    time_in_bed_minutes: float = 0.0
    efficiency: float = 0.0  # 0-100
    stages: SleepStageBreakdown | None = None
    is_main_sleep: bool = True


# ---------------------------------------------------------------------------
# Vitals
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HRVSample:
    """Nightly HRV as daily RMSSD in milliseconds."""

    date: date
    daily_rmssd_ms: float


@dataclass(frozen=True)
class SpO2Sample:
    """Nightly blood-oxygen average (%)."""

    date: date
    avg_percent: float
    min_percent: float | None = None
    max_percent: float | None = None


@dataclass(frozen=True)
class BreathingRateSample:
    """Nightly respiratory rate (breaths per minute)."""

    date: date
    breaths_per_minute: float


@dataclass(frozen=True)
class SkinTempSample:
    """Nightly skin temperature relative to the wearer's own baseline (°C)."""

    date: date
    nightly_relative_c: float


@dataclass(frozen=True)
class DailyInputs:
    """Everything the pipeline could gather for one day (all optional)."""

    date: date
    heart_rate: DailyHeartRateRecord | None = None
    activity: ActivitySummary | None = None
    sleep_history: tuple[SleepSession, ...] = ()
    night: tuple[SleepSession, ...] = ()  # sessions of the scored night
    hrv: HRVSample | None = None
    spo2: SpO2Sample | None = None
    breathing_rate: BreathingRateSample | None = None
    skin_temp: SkinTempSample | None = None
    hrv_history: tuple[HRVSample, ...] = ()
    heart_rate_history: tuple[DailyHeartRateRecord, ...] = ()
