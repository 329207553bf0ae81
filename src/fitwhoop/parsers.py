"""Parse wearable provider JSON payloads into :mod:`fitwhoop.records`.

Payload shapes follow the provider's Web API responses, e.g.::

    heart rate   {"activities-heart": [{"dateTime": ..., "value": {"restingHeartRate": ..., "heartRateZones": [...]}}]}
    activity     {"summary": {"veryActiveMinutes": ..., "caloriesOut": ...}}
    sleep        {"sleep": [{"dateOfSleep": ..., "levels": {"summary": {...}}, ...}]}
    hrv          {"hrv": [{"dateTime": ..., "value": {"dailyRmssd": ...}}]}
    spo2         {"dateTime": ..., "value": {"avg": ..., "min": ..., "max": ...}}  (or a list of these)
    breathing    {"br": [{"dateTime": ..., "value": {"breathingRate": ...}}]}
    skin temp    {"tempSkin": [{"dateTime": ..., "value": {"nightlyRelative": ...}}]}

Parsing is lenient: a missing payload yields ``None`` / ``[]``, and an
entry that cannot be read is dropped (and logged at DEBUG) rather than
failing the whole day.  The sleep stage layout is decided here, once per
session.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from fitwhoop.records import (
    ActivitySummary,
    BreathingRateSample,
    ClassicModel,
    DailyHeartRateRecord,
    HeartRateZoneSample,
    HRVSample,
    SkinTempSample,
    SleepSession,
    SleepStageBreakdown,
    SpO2Sample,
    StageModel,
)

logger = logging.getLogger(__name__)

# Errors that mean "this entry is malformed"
ENTRY_ERRORS = (KeyError, TypeError, ValueError, IndexError, AttributeError)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_date(value: Any) -> date:
    """Parse ``YYYY-MM-DD`` (or a full ISO timestamp) to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    return date.fromisoformat(text[:10])


def _num(value: Any, default: float = 0.0) -> float:
    """Coerce a numeric field, treating None as *default*."""
    if value is None:
        return default
    return float(value)


def _flag(value: Any, default: bool = True) -> bool:
    """Read a boolean field that may arrive as a string."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in ("false", "0", "no", "")
    return bool(value)


def _entries(payload: Any, key: str) -> list[dict]:
    if not isinstance(payload, dict):
        return []
    entries = payload.get(key) or []
    return entries if isinstance(entries, list) else []


# ---------------------------------------------------------------------------
# Heart rate
# ---------------------------------------------------------------------------


def _parse_zone(raw: dict) -> HeartRateZoneSample:
    return HeartRateZoneSample(
        name=str(raw["name"]),
        min_bpm=_num(raw.get("min")),
        max_bpm=_num(raw.get("max")),
        minutes_in_zone=_num(raw.get("minutes")),
    )


def _parse_zones(raw_zones: Any) -> tuple[HeartRateZoneSample, ...]:
    zones: list[HeartRateZoneSample] = []
    for raw in raw_zones or []:
        try:
            zones.append(_parse_zone(raw))
        except ENTRY_ERRORS as exc:
            logger.debug("Dropping heart rate zone %r: %s", raw, exc)
    return tuple(zones)


def _parse_heart_rate_entry(entry: dict) -> DailyHeartRateRecord:
    value = entry.get("value") or {}
    rhr = value.get("restingHeartRate")
    zones = _parse_zones(value.get("heartRateZones"))
    return DailyHeartRateRecord(
        date=parse_date(entry["dateTime"]),
        resting_heart_rate_bpm=float(rhr) if rhr else None,
        zones=zones,
    )


def parse_heart_rate_series(payload: Any) -> list[DailyHeartRateRecord]:
    """Parse a heart rate time-series payload (one record per day)."""
    records: list[DailyHeartRateRecord] = []
    for entry in _entries(payload, "activities-heart"):
        try:
            records.append(_parse_heart_rate_entry(entry))
        except ENTRY_ERRORS as exc:
            logger.debug("Dropping heart rate entry %r: %s", entry, exc)
    return records


def parse_heart_rate(payload: Any) -> DailyHeartRateRecord | None:
    """Parse a single-day heart rate payload."""
    records = parse_heart_rate_series(payload)
    return records[0] if records else None


# ---------------------------------------------------------------------------
# Activity
# ---------------------------------------------------------------------------


def parse_activity_summary(payload: Any, day: date | str | None = None) -> ActivitySummary | None:
    """Parse a daily activity payload.

    The provider's activity body carries no date of its own, so *day*
    supplies it (default: today).
    """
    if not isinstance(payload, dict):
        return None
    summary = payload.get("summary")
    if not isinstance(summary, dict):
        return None

    try:
        return ActivitySummary(
            date=parse_date(day) if day is not None else date.today(),
            very_active_minutes=_num(summary.get("veryActiveMinutes")),
            fairly_active_minutes=_num(summary.get("fairlyActiveMinutes")),
            lightly_active_minutes=_num(summary.get("lightlyActiveMinutes")),
            calories_out=_num(summary.get("caloriesOut")),
            steps=int(_num(summary.get("steps"))),
        )
    except ENTRY_ERRORS as exc:
        logger.debug("Dropping activity summary: %s", exc)
        return None


# ---------------------------------------------------------------------------
# Sleep
# ---------------------------------------------------------------------------


def _stage_minutes(summary: dict, key: str) -> float:
    stage = summary.get(key)
    if not isinstance(stage, dict):
        return 0.0
    return _num(stage.get("minutes"))


def parse_stages(summary: Any) -> SleepStageBreakdown | None:
    """Decide the stage layout from a ``levels.summary`` block.

    Any positive deep/light/rem minutes means the four-stage model.
    Otherwise an ``asleep`` key means the classic model.  With neither,
    there is no breakdown.
    """
    if not isinstance(summary, dict):
        return None

    deep = _stage_minutes(summary, "deep")
    light = _stage_minutes(summary, "light")
    rem = _stage_minutes(summary, "rem")
    if deep > 0 or light > 0 or rem > 0:
        return StageModel(
            deep_minutes=deep,
            light_minutes=light,
            rem_minutes=rem,
            wake_minutes=_stage_minutes(summary, "wake"),
        )

    if "asleep" in summary:
        return ClassicModel(
            asleep_minutes=_stage_minutes(summary, "asleep"),
            restless_minutes=_stage_minutes(summary, "restless"),
            awake_minutes=_stage_minutes(summary, "awake"),
        )

    return None


def _parse_sleep_entry(entry: dict) -> SleepSession:
    levels = entry.get("levels") or {}
    return SleepSession(
        date=parse_date(entry.get("dateOfSleep") or entry["startTime"]),
        start_time=entry.get("startTime"),
        end_time=entry.get("endTime"),
        minutes_asleep=_num(entry.get("minutesAsleep")),
        time_in_bed_minutes=_num(entry.get("timeInBed")),
        efficiency=_num(entry.get("efficiency")),
        stages=parse_stages(levels.get("summary")),
        is_main_sleep=_flag(entry.get("isMainSleep")),
    )


def parse_sleep(payload: Any) -> list[SleepSession]:
    """Parse a sleep log payload (single day or date range)."""
    sessions: list[SleepSession] = []
    for entry in _entries(payload, "sleep"):
        try:
            sessions.append(_parse_sleep_entry(entry))
        except ENTRY_ERRORS as exc:
            logger.debug("Dropping sleep entry: %s", exc)
    return sessions


# ---------------------------------------------------------------------------
# Vitals
# ---------------------------------------------------------------------------


def parse_hrv(payload: Any) -> list[HRVSample]:
    """Parse an HRV payload; entries without a positive RMSSD are dropped."""
    samples: list[HRVSample] = []
    for entry in _entries(payload, "hrv"):
        try:
            rmssd = _num((entry.get("value") or {}).get("dailyRmssd"))
            if rmssd <= 0:
                continue
            samples.append(HRVSample(date=parse_date(entry["dateTime"]), daily_rmssd_ms=rmssd))
        except ENTRY_ERRORS as exc:
            logger.debug("Dropping HRV entry %r: %s", entry, exc)
    return samples


def _parse_spo2_entry(entry: dict) -> SpO2Sample | None:
    value = entry.get("value") or {}
    avg = _num(value.get("avg"))
    if avg <= 0:
        return None
    low = value.get("min")
    high = value.get("max")
    return SpO2Sample(
        date=parse_date(entry["dateTime"]),
        avg_percent=avg,
        min_percent=float(low) if low is not None else None,
        max_percent=float(high) if high is not None else None,
    )


def parse_spo2_series(payload: Any) -> list[SpO2Sample]:
    """Parse an SpO2 payload (a single day object or a list of them)."""
    if isinstance(payload, dict):
        entries = [payload]
    elif isinstance(payload, list):
        entries = payload
    else:
        return []

    samples: list[SpO2Sample] = []
    for entry in entries:
        try:
            sample = _parse_spo2_entry(entry)
        except ENTRY_ERRORS as exc:
            logger.debug("Dropping SpO2 entry %r: %s", entry, exc)
            continue
        if sample is not None:
            samples.append(sample)
    return samples


def parse_spo2(payload: Any) -> SpO2Sample | None:
    """Parse the most recent SpO2 reading in a payload."""
    samples = parse_spo2_series(payload)
    return samples[-1] if samples else None


def parse_breathing_rate(payload: Any) -> list[BreathingRateSample]:
    """Parse a breathing rate payload."""
    samples: list[BreathingRateSample] = []
    for entry in _entries(payload, "br"):
        try:
            rate = _num((entry.get("value") or {}).get("breathingRate"))
            if rate <= 0:
                continue
            samples.append(BreathingRateSample(date=parse_date(entry["dateTime"]), breaths_per_minute=rate))
        except ENTRY_ERRORS as exc:
            logger.debug("Dropping breathing rate entry %r: %s", entry, exc)
    return samples


def parse_skin_temp(payload: Any) -> list[SkinTempSample]:
    """Parse a skin temperature payload (nightly relative deviation)."""
    samples: list[SkinTempSample] = []
    for entry in _entries(payload, "tempSkin"):
        try:
            rel = (entry.get("value") or {}).get("nightlyRelative")
            if rel is None:
                continue
            samples.append(SkinTempSample(date=parse_date(entry["dateTime"]), nightly_relative_c=float(rel)))
        except ENTRY_ERRORS as exc:
            logger.debug("Dropping skin temp entry %r: %s", entry, exc)
    return samples
