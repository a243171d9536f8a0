"""Active window arithmetic and keyed reconciliation of visible items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple


def clamp_viewport(y: float, context_height: float, viewport_height: float) -> float:
    """Clamp a viewport offset into ``[0, context_height - viewport_height]``.

    When the whole list is shorter than the viewport the only position is 0.
    """
    upper = max(0.0, context_height - viewport_height)
    return min(max(y, 0.0), upper)


def window_bounds(y: float, viewport_height: float, context_bar_height: float,
                  total: int) -> Tuple[int, int]:
    """``(low, high)`` indices covered by a viewport at offset ``y``."""
    low = int(y // context_bar_height)
    high = int((y + viewport_height) // context_bar_height)
    high = min(high, total)
    low = min(low, high)
    return low, high


@dataclass
class Reconciliation:
    enter: list = field(default_factory=list)
    exit: list = field(default_factory=list)
    update: list = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.enter or self.exit)


def reconcile(old_keys: Sequence[str], new_keys: Sequence[str]) -> Reconciliation:
    """Split a change of visible keys into entering, exiting and kept keys.

    ``enter`` and ``update`` follow the order of ``new_keys``; ``exit``
    follows ``old_keys``.
    """
    old = set(old_keys)
    new = set(new_keys)
    return Reconciliation(
        enter=[k for k in new_keys if k not in old],
        exit=[k for k in old_keys if k not in new],
        update=[k for k in new_keys if k in old],
    )
