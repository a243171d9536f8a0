"""Linear count -> pixel width scales for the main and context views."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from citybars import CityRecord


class LinearScale:
    """Maps ``domain`` linearly onto ``range``; accepts scalars or arrays."""

    def __init__(self, domain: Tuple[float, float], range: Tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range[0]), float(range[1]))

    def __call__(self, x):
        d0, d1 = self.domain
        r0, r1 = self.range
        x = np.asarray(x, dtype=float)
        if d1 == d0:
            # empty dataset: every bar collapses to the range start
            out = np.full_like(x, r0)
        else:
            out = r0 + (x - d0) * (r1 - r0) / (d1 - d0)
        return out.item() if out.ndim == 0 else out

    def __repr__(self):
        return f"LinearScale(domain={self.domain}, range={self.range})"


def max_count(cities: Sequence[CityRecord]) -> int:
    return max((c.value for c in cities), default=0)


def width_scale(cities: Sequence[CityRecord], pixel_width: float) -> LinearScale:
    """Scale from ``[0, max count]`` to ``[0, pixel_width]``."""
    return LinearScale((0, max_count(cities)), (0, pixel_width))
