"""Thread-safe decorator for interner engines.

SynchronizedInterner owns another engine and forwards every operation to it
under a readers-writer lock: lookups, counts and enumeration share the lock,
anything that mutates holds it exclusively. It keeps no state of its own, so
the wrapped engine's invariants and failure modes carry through unchanged.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Tuple

import numpy as np

from interner import Value
from interner.errors import InternerError
from interner.interner import Interner
from interner.protocol import InternerOps, InternerProtocol, batch_interned
from interner.sync.rwlock import ReadWriteLock
from interner.types.efficiency import EfficiencyMode
from interner.types.symbol import Symbol


class SynchronizedInterner(InternerOps):
    __slots__ = ("_base", "_lock")

    def __init__(self, base: Optional[InternerProtocol] = None):
        if base is None:
            base = Interner()
        if not isinstance(base, InternerProtocol):
            raise InternerError(f"Cannot synchronize {type(base).__name__}, it is not an interner")
        self._base = base
        self._lock = ReadWriteLock()

    @classmethod
    def efficient_for(cls, mode: EfficiencyMode | str = EfficiencyMode.TIME, width: Any = None) -> SynchronizedInterner:
        return cls(Interner(mode, width))

    @property
    def base(self) -> InternerProtocol:
        """The wrapped engine. Touch it directly only while no other thread uses this interner."""
        return self._base

    # --- shared (read) operations ---
    @property
    def count(self) -> int:
        with self._lock.read():
            return self._base.count

    @property
    def is_empty(self) -> bool:
        with self._lock.read():
            return self._base.is_empty

    def lookup(self, symbol: Symbol, default: Any = None) -> Any:
        with self._lock.read():
            return self._base.lookup(symbol, default)

    def __iter__(self) -> Iterator[Tuple[Value, Symbol]]:
        # Snapshot under the lock; callers iterate without holding it.
        with self._lock.read():
            pairs = list(self._base)
        return iter(pairs)

    # --- exclusive (write) operations ---
    def interned(self, value: Value) -> Symbol:
        with self._lock.write():
            return self._base.interned(value)

    def interned_many(self, values: Iterable[Value]) -> np.ndarray:
        """Intern a batch under a single exclusive acquisition."""
        values = list(values)
        with self._lock.write():
            return batch_interned(self._base, values)

    def reserve_capacity(self, minimum_capacity: int) -> None:
        with self._lock.write():
            self._base.reserve_capacity(minimum_capacity)

    def remove_all(self, keep_capacity: bool = False) -> None:
        with self._lock.write():
            self._base.remove_all(keep_capacity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SynchronizedInterner):
            return NotImplemented
        if other is self:
            return True
        # Fixed acquisition order so two threads comparing a == b and b == a cannot deadlock.
        first, second = sorted((self, other), key=id)
        with first._lock.read(), second._lock.read():
            return self._base == other._base

    __hash__ = None

    def __repr__(self) -> str:
        with self._lock.read():
            return f"SynchronizedInterner({self._base!r})"
