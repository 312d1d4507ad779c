from __future__ import annotations

from enum import Enum

from interner.errors import InternerConfigError


class EfficiencyMode(Enum):
    """Storage strategy of an interner, fixed at construction.

    TIME keeps a reverse index next to the forward mapping, so every value is
    stored twice and symbol-to-value lookups are O(1).
    SPACE keeps only the forward mapping, halving the footprint at the cost of
    O(N) symbol-to-value lookups.
    """

    TIME = "time"
    SPACE = "space"

    @classmethod
    def parse(cls, mode: EfficiencyMode | str) -> EfficiencyMode:
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode.strip().lower())
            except ValueError:
                pass
        raise InternerConfigError(f"Unknown efficiency mode {mode!r}, expected 'time' or 'space'")
