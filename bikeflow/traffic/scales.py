# bikeflow/traffic/scales.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

RADIUS_RANGE = (2.0, 40.0)
FLOW_BUCKETS = (0.0, 0.5, 1.0)
NEUTRAL_RATIO = 0.5


def _signed_sqrt(x: float) -> float:
    return math.copysign(math.sqrt(abs(x)), x)


@dataclass(frozen=True)
class SqrtScale:
    """
    Square-root scale: domain [d0, d1] -> range [r0, r1].

    Not clamped. A zero-width domain maps everything to the middle of the
    range.
    """
    domain: Tuple[float, float]
    range: Tuple[float, float] = RADIUS_RANGE

    def __call__(self, value: float) -> float:
        d0, d1 = (_signed_sqrt(float(d)) for d in self.domain)
        r0, r1 = (float(r) for r in self.range)

        span = d1 - d0
        t = (_signed_sqrt(float(value)) - d0) / span if span else 0.5
        return r0 + t * (r1 - r0)


@dataclass(frozen=True)
class QuantizeScale:
    """
    Quantize scale: splits a continuous domain into len(range) equal slices
    and returns the range value of the slice `value` lands in.

    With domain (0, 1) and range (0, 0.5, 1) the cut points are 1/3 and 2/3;
    a value exactly on a cut point goes to the upper slice.
    """
    domain: Tuple[float, float] = (0.0, 1.0)
    range: Tuple[float, ...] = FLOW_BUCKETS
    thresholds: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.range:
            raise ValueError("QuantizeScale needs at least one range value")
        x0, x1 = (float(d) for d in self.domain)
        n = len(self.range)
        cuts = np.linspace(x0, x1, n + 1)[1:-1]
        object.__setattr__(self, "thresholds", cuts)

    def __call__(self, value: float):
        idx = int(np.searchsorted(self.thresholds, float(value), side="right"))
        return self.range[idx]


def flow_ratio(departures: int, total_traffic: int) -> float:
    # stations with no trips render as balanced
    if total_traffic <= 0:
        return NEUTRAL_RATIO
    return departures / total_traffic
