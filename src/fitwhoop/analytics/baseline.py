"""Personal baselines from a wearer's own history.

A baseline is the (mean, standard deviation) of a metric over the last
few weeks, e.g. nightly RMSSD or resting heart rate.  Scorers compare the
current value against it instead of a population constant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


# Minimum number of usable samples before a baseline is trusted
MIN_SAMPLES = 2

# Typical history length requested from the provider (days)
BASELINE_DAYS = 30


@dataclass(frozen=True)
class Baseline:
    """Personal reference for one metric."""

    mean: float
    std_dev: float  # population SD (ddof=0)
    sample_count: int

    def __repr__(self) -> str:
        return f"Baseline(mean={self.mean:.1f}, sd={self.std_dev:.1f}, n={self.sample_count})"


def estimate_baseline(samples: Iterable[float | None]) -> Baseline | None:
    """Compute a baseline from historical samples.

    Zero, negative, ``None`` and NaN entries are missing days and are
    ignored.  With fewer than :data:`MIN_SAMPLES` usable values there is no
    baseline and ``None`` is returned.

    Args:
        samples: Historical values in any order.

    Returns:
        Baseline with mean and population standard deviation, or None.
    """
    usable = [float(v) for v in samples if v is not None and v > 0]
    if len(usable) < MIN_SAMPLES:
        return None

    # Sorted so the floating-point sum does not depend on input order
    arr = np.sort(np.asarray(usable, dtype=np.float64))
    if arr[0] == arr[-1]:
        # Constant series: avoid rounding noise in the mean leaking into the SD
        return Baseline(mean=float(arr[0]), std_dev=0.0, sample_count=len(arr))

    mean = float(np.mean(arr))
    std = float(np.std(arr))

    return Baseline(mean=mean, std_dev=std, sample_count=len(arr))
