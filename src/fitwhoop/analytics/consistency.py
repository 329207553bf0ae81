"""Sleep consistency from the spread of bed and wake times.

Clock times are mapped to minutes since the previous local noon, so that a
23:30 bedtime and a 00:30 bedtime are 60 minutes apart rather than 23
hours.  The score drops by 0.3 points for every minute of combined
standard deviation in bedtime and wake time.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Sequence

import numpy as np

from fitwhoop.records import SleepSession

logger = logging.getLogger(__name__)

PERFECT_CONSISTENCY = 100

# Points lost per minute of (bedtime SD + wake SD)
PENALTY_PER_MINUTE = 0.3

NOON_MINUTES = 12 * 60
DAY_MINUTES = 24 * 60


def _parse_time(value: datetime | str | None) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def minutes_since_noon(ts: datetime) -> float:
    """Minutes elapsed since the local noon preceding *ts*."""
    minutes = ts.hour * 60 + ts.minute + ts.second / 60.0 - NOON_MINUTES
    if ts.hour < 12:
        minutes += DAY_MINUTES
    return minutes


def _population_sd(values: list[float]) -> float:
    sd = float(np.std(np.asarray(values, dtype=np.float64)))
    return 0.0 if math.isnan(sd) else sd


def score_sleep_consistency(history: Sequence[SleepSession] | None) -> int:
    """Score bed/wake regularity over a multi-night history.

    Every session counts, naps included.  Sessions whose start or end
    time cannot be parsed are skipped.

    Returns:
        0-100; 100 when fewer than two sessions have usable times.
    """
    if not history:
        return PERFECT_CONSISTENCY

    bed_offsets: list[float] = []
    wake_offsets: list[float] = []
    for s in history:
        start = _parse_time(s.start_time)
        end = _parse_time(s.end_time)
        if start is None or end is None:
            logger.debug("Skipping session %s: unparsable start/end time", s.date)
            continue
        bed_offsets.append(minutes_since_noon(start))
        wake_offsets.append(minutes_since_noon(end))

    if len(bed_offsets) < 2:
        return PERFECT_CONSISTENCY

    spread = _population_sd(bed_offsets) + _population_sd(wake_offsets)
    score = float(np.clip(PERFECT_CONSISTENCY - PENALTY_PER_MINUTE * spread, 0.0, 100.0))
    return int(round(score))
