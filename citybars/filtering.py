"""Case-insensitive pattern filter over the active window."""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Matcher = Callable[[str], bool]


def _match_nothing(_key: str) -> bool:
    return False


def compile_matcher(pattern: str) -> Matcher:
    """Build a case-insensitive matcher for ``pattern``.

    An empty pattern matches nothing. A pattern that is not a valid regular
    expression is matched as literal text instead.
    """
    if not pattern:
        return _match_nothing
    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        logger.debug(f"Invalid filter pattern {pattern!r} ({e}); matching literally")
        regex = re.compile(re.escape(pattern), re.IGNORECASE)
    return lambda key: regex.search(key) is not None


class FilterController:
    """Marks records of the active window as selected.

    ``state`` is anything with ``active_cities`` and ``filter_pattern``
    attributes (see :class:`citybars.state.ExplorerState`).
    """

    def __init__(self, state):
        self.state = state

    def apply(self, pattern: Optional[str] = None) -> list[str]:
        """Apply ``pattern`` (or re-apply the current one) to the active window.

        Returns the keys that ended up selected.
        """
        if pattern is not None:
            self.state.filter_pattern = pattern
        matches = compile_matcher(self.state.filter_pattern)

        selected = []
        for city in self.state.active_cities:
            city.selected = matches(city.key)
            if city.selected:
                selected.append(city.key)

        logger.debug(f"Filter {self.state.filter_pattern!r}: {len(selected)} selected")
        return selected
