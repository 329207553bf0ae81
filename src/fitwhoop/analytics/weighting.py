"""Weighted composition of optional score components.

A composite score is built from components that may or may not be
available on a given day.  Missing components are excluded and the
divisor shrinks to the weights that remain, so a day with only sleep
data scores on sleep alone instead of being dragged toward zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class WeightedComponent:
    """One term of a weighted composite."""

    name: str
    weight: float
    value: float  # component score on the composite's scale
    present: bool

    @classmethod
    def from_raw(
        cls,
        name: str,
        weight: float,
        raw: float | None,
        value: float,
    ) -> WeightedComponent:
        """Build a component whose presence is decided by its raw input.

        A raw input counts as present only if it is not ``None`` and
        strictly positive.
        """
        present = raw is not None and raw > 0
        return cls(name=name, weight=weight, value=value if present else 0.0, present=present)


def weighted_score(components: Iterable[WeightedComponent]) -> float | None:
    """Reduce components to ``sum(w * v) / sum(w)`` over present terms.

    Returns ``None`` when nothing is present.
    """
    total = 0.0
    divisor = 0.0
    for c in components:
        if not c.present:
            continue
        total += c.weight * c.value
        divisor += c.weight

    if divisor <= 0:
        return None
    return total / divisor
