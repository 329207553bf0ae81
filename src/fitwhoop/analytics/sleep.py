"""Sleep performance from a provider-scored sleep session.

The wearable already stages the night, so scoring here is a reduction of
the main session: stage minutes become hours, deep + REM become
"restorative" sleep, and the session's efficiency (0-100) is the sleep
performance score.

Two stage layouts exist:

- StageModel (deep / light / rem / wake): used as-is.
- ClassicModel (asleep / restless / awake): ``asleep`` is reported as
  light sleep, and ``restless`` is folded into awake, since neither can be
  treated as restorative.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from fitwhoop.records import ClassicModel, SleepSession, StageModel


@dataclass(frozen=True)
class StageHours:
    """Time per sleep stage, in hours."""

    deep: float = 0.0
    light: float = 0.0
    rem: float = 0.0
    awake: float = 0.0


@dataclass(frozen=True)
class Restorative:
    """Deep + REM sleep."""

    hours: float = 0.0
    percentage_of_sleep: int = 0


@dataclass(frozen=True)
class SleepResult:
    """Sleep performance for one night."""

    score: float = 0.0  # session efficiency, 0-100
    total_sleep_hours: float = 0.0
    time_in_bed_hours: float = 0.0
    stage_hours: StageHours = field(default_factory=StageHours)
    restorative: Restorative = field(default_factory=Restorative)
    start_time: datetime | str | None = None
    end_time: datetime | str | None = None

    def __repr__(self) -> str:
        return (
            f"SleepResult(score={self.score:.0f}, "
            f"sleep={self.total_sleep_hours:.1f}h, "
            f"bed={self.time_in_bed_hours:.1f}h, "
            f"restorative={self.restorative.percentage_of_sleep}%)"
        )


def select_main_sleep(history: Sequence[SleepSession] | None) -> SleepSession | None:
    """Return the session flagged as main sleep, else the first, else None."""
    if not history:
        return None
    for session in history:
        if session.is_main_sleep:
            return session
    return history[0]


def _stage_minutes(session: SleepSession) -> tuple[float, float, float, float]:
    """Return (deep, light, rem, awake) minutes for a session."""
    stages = session.stages
    if isinstance(stages, StageModel):
        return (
            stages.deep_minutes,
            stages.light_minutes,
            stages.rem_minutes,
            stages.wake_minutes,
        )
    if isinstance(stages, ClassicModel):
        return (
            0.0,
            stages.asleep_minutes,
            0.0,
            stages.awake_minutes + stages.restless_minutes,
        )
    return (0.0, 0.0, 0.0, 0.0)


def _hours(minutes: float) -> float:
    return round(minutes / 60.0, 1)


def score_sleep(history: Sequence[SleepSession] | None) -> SleepResult:
    """Score the main sleep session of a night.

    Args:
        history: Sleep sessions for the night (naps included).  May be
            empty or None.

    Returns:
        SleepResult; all-zero when there is no session.
    """
    session = select_main_sleep(history)
    if session is None:
        return SleepResult()

    deep, light, rem, awake = _stage_minutes(session)

    restorative_min = deep + rem
    if session.minutes_asleep > 0:
        pct = round(100.0 * restorative_min / session.minutes_asleep)
    else:
        pct = 0

    return SleepResult(
        score=max(0.0, min(100.0, float(session.efficiency))),
        total_sleep_hours=_hours(session.minutes_asleep),
        time_in_bed_hours=_hours(session.time_in_bed_minutes),
        stage_hours=StageHours(
            deep=_hours(deep),
            light=_hours(light),
            rem=_hours(rem),
            awake=_hours(awake),
        ),
        restorative=Restorative(hours=_hours(restorative_min), percentage_of_sleep=int(pct)),
        start_time=session.start_time,
        end_time=session.end_time,
    )
