"""General purpose object interner.

The Interner assigns every distinct hashable value a Symbol whose raw id is
the position at which the value was first seen: 0, 1, 2, ... without gaps.
It is not thread-safe; wrap it in a SynchronizedInterner for concurrent use.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional, Tuple

import numpy as np

from interner import Value
from interner.config import get_default_mode, get_default_width, resolve_width
from interner.errors import InternerError, InternerOverflowError
from interner.protocol import InternerOps
from interner.types.efficiency import EfficiencyMode
from interner.types.symbol import Symbol, _mint

logger = logging.getLogger(__name__)


class Interner(InternerOps):
    """Bijection between hashable values and densely numbered Symbols."""

    __slots__ = (
        "_mode",
        "_width",
        "_max_raw_id",
        "_forward",
        "_reverse",
        "_capacity",
    )

    def __init__(self, mode: EfficiencyMode | str | None = None, width: Any = None):
        """Create an empty interner.

        mode:  EfficiencyMode.TIME keeps a reverse index for O(1) lookups,
               EfficiencyMode.SPACE stores each value once and scans on lookup.
               Defaults to INTERNER_EFFICIENCY, else TIME.
        width: numpy integer dtype bounding the raw ids this interner may issue.
               Defaults to INTERNER_SYMBOL_WIDTH, else uint32.
        """
        self._mode: EfficiencyMode = get_default_mode() if mode is None else EfficiencyMode.parse(mode)
        self._width: np.dtype = get_default_width() if width is None else resolve_width(width)
        self._max_raw_id: int = int(np.iinfo(self._width).max)
        # Single source of truth for membership and forward lookups
        self._forward: dict[Value, Symbol] = {}
        # Reverse index, raw id -> value. Only kept when optimizing for time.
        self._reverse: Optional[list[Value]] = [] if self._mode is EfficiencyMode.TIME else None
        self._capacity: int = 0

    # --- configuration ---
    @property
    def mode(self) -> EfficiencyMode:
        return self._mode

    @property
    def width(self) -> np.dtype:
        return self._width

    @property
    def max_raw_id(self) -> int:
        return self._max_raw_id

    @property
    def capacity(self) -> int:
        return self._capacity

    # --- queries ---
    @property
    def count(self) -> int:
        return len(self._forward)

    @property
    def is_empty(self) -> bool:
        return not self._forward

    def lookup(self, symbol: Symbol, default: Any = None) -> Any:
        """Return the value `symbol` stands for, or `default` if this interner never issued it."""
        if not isinstance(symbol, Symbol):
            raise InternerError(f"Cannot look up {symbol!r}, expected a Symbol")
        if self._reverse is None:
            return self._linear_lookup(symbol, default)
        raw_id = symbol.raw_id
        if raw_id < len(self._reverse):
            return self._reverse[raw_id]
        return default

    def _linear_lookup(self, symbol: Symbol, default: Any) -> Any:
        # Space mode: O(N) scan of the forward mapping
        for value, candidate in self._forward.items():
            if candidate == symbol:
                return value
        return default

    # --- mutation ---
    def interned(self, value: Value) -> Symbol:
        """Return the symbol for `value`, minting the next one if `value` is new."""
        symbol = self._forward.get(value)
        if symbol is not None:
            return symbol

        raw_id = len(self._forward)
        if raw_id > self._max_raw_id:
            logger.error(
                "Symbol width %s exhausted: raw id %d not in 0...%d",
                self._width.name, raw_id, self._max_raw_id,
            )
            raise InternerOverflowError(
                f"Out of bounds: {raw_id} not in 0...{self._max_raw_id} ({self._width.name})"
            )
        symbol = _mint(raw_id)

        self._forward[value] = symbol
        if self._reverse is not None:
            self._reverse.append(value)
        return symbol

    def interned_many(self, values: Iterable[Value]) -> np.ndarray:
        """Intern `values` in order, returning their raw ids as an array of this interner's width.

        All or nothing: if the new values would not fit the symbol width, nothing
        is interned and InternerOverflowError is raised.
        """
        values = list(values)
        fresh = [value for value in dict.fromkeys(values) if value not in self._forward]
        last_raw_id = len(self._forward) + len(fresh) - 1
        if fresh and last_raw_id > self._max_raw_id:
            logger.error(
                "Symbol width %s exhausted: batch needs raw ids up to %d, limit is %d",
                self._width.name, last_raw_id, self._max_raw_id,
            )
            raise InternerOverflowError(
                f"Out of bounds: batch of {len(fresh)} new values needs raw id {last_raw_id}, "
                f"not in 0...{self._max_raw_id} ({self._width.name})"
            )
        raw_ids = [self.interned(value).raw_id for value in values]
        return np.array(raw_ids, dtype=self._width)

    def reserve_capacity(self, minimum_capacity: int) -> None:
        """Hint that at least `minimum_capacity` values will be interned.

        Python's dict and list grow on their own, so this only records the hint;
        it never changes what the interner holds.
        """
        if minimum_capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {minimum_capacity}")
        if minimum_capacity > self._max_raw_id + 1:
            logger.warning(
                "Reserving %d entries, but %s symbols can only address %d values",
                minimum_capacity, self._width.name, self._max_raw_id + 1,
            )
        self._capacity = max(self._capacity, minimum_capacity)
        logger.debug("Reserved capacity %d (count=%d)", self._capacity, len(self._forward))

    def remove_all(self, keep_capacity: bool = False) -> None:
        """Forget every value. Symbols issued so far become stale and raw ids restart at 0."""
        logger.debug("Removing %d values (keep_capacity=%s)", len(self._forward), keep_capacity)
        if keep_capacity:
            self._forward.clear()
            if self._reverse is not None:
                self._reverse.clear()
            return
        self._forward = {}
        if self._reverse is not None:
            self._reverse = []
        self._capacity = 0

    # --- enumeration & comparison ---
    def __iter__(self) -> Iterator[Tuple[Value, Symbol]]:
        return iter(self._forward.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interner):
            return NotImplemented
        return self._forward == other._forward and self._reverse == other._reverse

    # Mutable container, unhashable like dict
    __hash__ = None

    def __repr__(self) -> str:
        return f"Interner(mode={self._mode.value!r}, width={self._width.name!r}, count={len(self._forward)})"
