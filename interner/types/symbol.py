from __future__ import annotations

import operator
from functools import total_ordering

from interner.errors import InternerError


@total_ordering
class Symbol:
    """Opaque handle for an interned value, backed by a raw integer id.

    Symbols are issued by interners only. Equality, hashing and ordering go
    through the raw id, so comparing two symbols never touches the values they
    stand for. A symbol means nothing outside the interner that issued it.
    """

    __slots__ = ("raw_id",)

    def __init__(self, *args, **kwargs):
        raise TypeError("Symbols are issued by interners; use Symbol.unchecked() to build one from a raw id")

    @classmethod
    def unchecked(cls, raw_id: int) -> Symbol:
        """Build a symbol from a raw id without asking any interner.

        Useful for testing lookups; the result is only meaningful for an
        interner that actually issued `raw_id`.
        """
        if isinstance(raw_id, bool):
            raise InternerError(f"Raw symbol id must be a non-negative int, got {raw_id!r}")
        try:
            index = operator.index(raw_id)
        except TypeError as e:
            raise InternerError(f"Raw symbol id must be a non-negative int, got {raw_id!r}") from e
        if index < 0:
            raise InternerError(f"Raw symbol id must be a non-negative int, got {raw_id!r}")
        return _mint(index)

    def __eq__(self, other: Symbol) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.raw_id == other.raw_id

    def __lt__(self, other: Symbol) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.raw_id < other.raw_id

    def __hash__(self) -> int:
        return hash(self.raw_id)

    def __int__(self) -> int:
        return self.raw_id

    def __index__(self) -> int:
        return self.raw_id

    def __setattr__(self, name, value):
        raise AttributeError("Symbol is immutable")

    def __reduce__(self):
        return _mint, (self.raw_id,)

    def __repr__(self):
        return f"Symbol({self.raw_id!r})"

    def __str__(self):
        return str(self.raw_id)


def _mint(raw_id: int) -> Symbol:
    # Interners call this directly; raw_id is already validated by the caller.
    symbol = object.__new__(Symbol)
    object.__setattr__(symbol, "raw_id", raw_id)
    return symbol
