from __future__ import annotations

from typing import Any, Iterable, Iterator, NamedTuple, Optional, Tuple, Type, TypeVar

import numpy as np

from interner import Value
from interner.errors import InternerTypeError
from interner.interner import Interner
from interner.protocol import InternerOps, InternerProtocol, _MISSING, batch_interned
from interner.types.symbol import Symbol

T = TypeVar("T")


class TypedValue(NamedTuple):
    """A value tagged with its concrete type.

    The tag takes part in equality and hashing, so 1, 1.0 and True (equal as
    plain dict keys) intern to three different symbols.
    """

    tag: type
    payload: Value

    @classmethod
    def of(cls, value: Value) -> TypedValue:
        return cls(type(value), value)


class ErasedInterner(InternerOps):
    """Interns any hashable value and hands it back as the type it went in as.

    Composes an engine over TypedValue keys; pass a SynchronizedInterner as
    `base` to share one across threads.
    """

    __slots__ = ("_base",)

    def __init__(self, base: Optional[InternerProtocol] = None):
        self._base = Interner() if base is None else base

    @property
    def base(self) -> InternerProtocol:
        return self._base

    @property
    def count(self) -> int:
        return self._base.count

    @property
    def is_empty(self) -> bool:
        return self._base.is_empty

    def interned(self, value: Value) -> Symbol:
        return self._base.interned(TypedValue.of(value))

    def interned_many(self, values: Iterable[Value]) -> np.ndarray:
        return batch_interned(self._base, [TypedValue.of(value) for value in values])

    def lookup(self, symbol: Symbol, default: Any = None) -> Any:
        typed = self._base.lookup(symbol, _MISSING)
        if typed is _MISSING:
            return default
        return typed.payload

    def lookup_as(self, symbol: Symbol, cls: Type[T], default: Any = None) -> T:
        """Look up `symbol` expecting a value of exactly type `cls`.

        Returns `default` if the symbol is unknown; raises InternerTypeError if
        it was interned for a different type.
        """
        typed = self._base.lookup(symbol, _MISSING)
        if typed is _MISSING:
            return default
        if typed.tag is not cls:
            raise InternerTypeError(
                f"Symbol {symbol} was interned as {typed.tag.__name__}, not {cls.__name__}"
            )
        return typed.payload

    def reserve_capacity(self, minimum_capacity: int) -> None:
        self._base.reserve_capacity(minimum_capacity)

    def remove_all(self, keep_capacity: bool = False) -> None:
        self._base.remove_all(keep_capacity)

    def __iter__(self) -> Iterator[Tuple[Value, Symbol]]:
        for typed, symbol in self._base:
            yield typed.payload, symbol

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErasedInterner):
            return NotImplemented
        return self._base == other._base

    __hash__ = None

    def __repr__(self) -> str:
        return f"ErasedInterner({self._base!r})"
