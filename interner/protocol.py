"""Capability set shared by every interner engine.

Storage engines (the core Interner), decorators (SynchronizedInterner) and
adapters (ErasedInterner) all speak the same narrow set of operations, so any
of them can be wrapped by any other. Engines implement the abstract part of
the set; the InternerOps mixin derives the conveniences from it.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

from interner import Value
from interner.errors import InternerUnknownSymbol
from interner.types.symbol import Symbol

# Distinguishes "not found" from an interned None.
_MISSING = object()


@runtime_checkable
class InternerProtocol(Protocol):
    @property
    def count(self) -> int: ...

    @property
    def is_empty(self) -> bool: ...

    def interned(self, value: Value) -> Symbol: ...

    def lookup(self, symbol: Symbol, default: Any = None) -> Any: ...

    def reserve_capacity(self, minimum_capacity: int) -> None: ...

    def remove_all(self, keep_capacity: bool = False) -> None: ...

    def __iter__(self) -> Iterator[Tuple[Value, Symbol]]: ...


class InternerOps:
    """Conveniences derived from the InternerProtocol operations."""

    __slots__ = ()

    def intern(self, value: Value) -> None:
        """Intern `value`, discarding its symbol."""
        self.interned(value)

    def lookup_unchecked(self, symbol: Symbol) -> Value:
        """Look up `symbol`, raising InternerUnknownSymbol if this interner never issued it."""
        value = self.lookup(symbol, _MISSING)
        if value is _MISSING:
            raise InternerUnknownSymbol(f"Failed to look up symbol {symbol!r}")
        return value

    def __len__(self) -> int:
        return self.count


def batch_interned(engine: InternerProtocol, values: Sequence[Value]) -> np.ndarray:
    """Intern `values` through `engine`, returning their raw ids as an array.

    Uses the engine's own `interned_many` when it has one (the core Interner's
    is all or nothing on overflow); otherwise interns value by value and sizes
    the array from the engine's `width`, falling back to uint64.
    """
    batch = getattr(engine, "interned_many", None)
    if batch is not None:
        return batch(values)
    raw_ids = [engine.interned(value).raw_id for value in values]
    return np.array(raw_ids, dtype=getattr(engine, "width", np.uint64))
