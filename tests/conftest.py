"""Shared fixtures and helpers for the fitwhoop test suite."""

from __future__ import annotations

import json
from datetime import date, timedelta
from pathlib import Path

import pytest

from fitwhoop.records import (
    ActivitySummary,
    ClassicModel,
    DailyHeartRateRecord,
    HeartRateZoneSample,
    SleepSession,
    StageModel,
)


DAY = date(2026, 2, 13)


# ---------------------------------------------------------------------------
# Record builders
# ---------------------------------------------------------------------------


def make_zones() -> tuple[HeartRateZoneSample, ...]:
    return (
        HeartRateZoneSample("Out of Range", 30, 98, 1200),
        HeartRateZoneSample("Fat Burn", 98, 137, 90),
        HeartRateZoneSample("Cardio", 137, 166, 25),
        HeartRateZoneSample("Peak", 166, 220, 5),
    )


def make_heart_rate(rhr: float | None = 55.0, day: date = DAY) -> DailyHeartRateRecord:
    return DailyHeartRateRecord(date=day, resting_heart_rate_bpm=rhr, zones=make_zones())


def make_activity(
    very: float = 30.0,
    fairly: float = 30.0,
    lightly: float = 120.0,
    calories: float = 2000.0,
    day: date = DAY,
) -> ActivitySummary:
    return ActivitySummary(
        date=day,
        very_active_minutes=very,
        fairly_active_minutes=fairly,
        lightly_active_minutes=lightly,
        calories_out=calories,
        steps=9000,
    )


def make_session(
    day: date = DAY,
    start: str | None = "2026-02-12T23:00:00.000",
    end: str | None = "2026-02-13T07:00:00.000",
    minutes_asleep: float = 420.0,
    time_in_bed: float = 480.0,
    efficiency: float = 88.0,
    stages=None,
    is_main_sleep: bool = True,
) -> SleepSession:
    if stages is None:
        stages = StageModel(deep_minutes=90, light_minutes=240, rem_minutes=90, wake_minutes=60)
    return SleepSession(
        date=day,
        start_time=start,
        end_time=end,
        minutes_asleep=minutes_asleep,
        time_in_bed_minutes=time_in_bed,
        efficiency=efficiency,
        stages=stages,
        is_main_sleep=is_main_sleep,
    )


def make_classic_session(asleep: float = 300, restless: float = 20, awake: float = 10) -> SleepSession:
    return make_session(
        minutes_asleep=asleep,
        time_in_bed=asleep + restless + awake,
        stages=ClassicModel(asleep_minutes=asleep, restless_minutes=restless, awake_minutes=awake),
    )


def make_week(hours: list[float], end_day: date = DAY) -> list[SleepSession]:
    """One main session per night, oldest first, ending on *end_day*."""
    n = len(hours)
    sessions = []
    for i, h in enumerate(hours):
        d = end_day - timedelta(days=n - 1 - i)
        sessions.append(make_session(
            day=d,
            start=f"{d - timedelta(days=1)}T23:00:00",
            end=f"{d}T07:00:00",
            minutes_asleep=h * 60.0,
        ))
    return sessions


# ---------------------------------------------------------------------------
# Provider payload builders
# ---------------------------------------------------------------------------


def heart_rate_payload(entries: list[tuple[str, float | None]]) -> dict:
    return {
        "activities-heart": [
            {
                "dateTime": d,
                "value": {
                    "restingHeartRate": rhr,
                    "heartRateZones": [
                        {"name": "Fat Burn", "min": 98, "max": 137, "minutes": 90},
                        {"name": "Cardio", "min": 137, "max": 166, "minutes": 25},
                    ],
                },
            }
            for d, rhr in entries
        ]
    }


def sleep_entry(
    date_of_sleep: str,
    start: str,
    end: str,
    minutes_asleep: int = 420,
    efficiency: int = 90,
    summary: dict | None = None,
    is_main: bool = True,
) -> dict:
    if summary is None:
        summary = {
            "deep": {"count": 4, "minutes": 80},
            "light": {"count": 30, "minutes": 250},
            "rem": {"count": 6, "minutes": 90},
            "wake": {"count": 20, "minutes": 50},
        }
    return {
        "dateOfSleep": date_of_sleep,
        "startTime": start,
        "endTime": end,
        "minutesAsleep": minutes_asleep,
        "timeInBed": minutes_asleep + 50,
        "efficiency": efficiency,
        "isMainSleep": is_main,
        "levels": {"summary": summary},
    }


def hrv_payload(entries: list[tuple[str, float]]) -> dict:
    return {"hrv": [{"dateTime": d, "value": {"dailyRmssd": v, "deepRmssd": v}} for d, v in entries]}


@pytest.fixture
def bundle() -> dict:
    """A complete one-day bundle with 7 nights of history."""
    history = []
    for i in range(7):
        d = DAY - timedelta(days=6 - i)
        prev = d - timedelta(days=1)
        history.append(sleep_entry(str(d), f"{prev}T23:00:00.000", f"{d}T07:00:00.000"))

    return {
        "date": str(DAY),
        "heart_rate": heart_rate_payload([(str(DAY), 52)]),
        "heart_rate_history": heart_rate_payload(
            [(str(DAY - timedelta(days=i)), 50 + (i % 3)) for i in range(1, 15)]
        ),
        "activity": {
            "summary": {
                "veryActiveMinutes": 30,
                "fairlyActiveMinutes": 30,
                "lightlyActiveMinutes": 120,
                "caloriesOut": 2000,
                "steps": 9500,
            }
        },
        "sleep": {"sleep": [history[-1]]},
        "sleep_history": {"sleep": history},
        "hrv": hrv_payload([(str(DAY), 65.0)]),
        "hrv_history": hrv_payload([(str(DAY - timedelta(days=i)), 60.0 + (i % 4)) for i in range(1, 15)]),
        "spo2": {"dateTime": str(DAY), "value": {"avg": 96.4, "min": 93.0, "max": 99.1}},
        "breathing_rate": {"br": [{"dateTime": str(DAY), "value": {"breathingRate": 14.2}}]},
        "skin_temp": {"tempSkin": [{"dateTime": str(DAY), "value": {"nightlyRelative": -0.3}}]},
    }


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data))
    return path
