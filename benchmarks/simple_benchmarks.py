import random
from timeit import timeit

from interner.interner import Interner
from interner.synchronized import SynchronizedInterner
from interner.types.efficiency import EfficiencyMode

NUM_OBJECTS_FOR_INTERNING = 100_000
NUM_OBJECTS_FOR_LOOKUP = 10_000


class Element:
    """Hashable by id only, carrying a payload so values are not trivially small."""

    __slots__ = ("id", "data")

    def __init__(self, id: int):
        self.id = id
        self.data = bytearray(100)

    def __eq__(self, other):
        return isinstance(other, Element) and self.id == other.id

    def __hash__(self):
        return hash(self.id)


def _elements(n: int) -> list[Element]:
    return [Element(random.getrandbits(63)) for _ in range(n)]


def bench_interning(mode: EfficiencyMode, n: int = NUM_OBJECTS_FOR_INTERNING) -> float:
    """Time interning n fresh objects into an empty interner."""
    objects = _elements(n)

    def run():
        interner = Interner(mode, "uint32")
        for obj in objects:
            interner.intern(obj)

    return timeit(run, number=1)


def bench_lookup(mode: EfficiencyMode, n: int = NUM_OBJECTS_FOR_LOOKUP) -> float:
    """Time looking up every symbol of an interner holding n objects."""
    interner = Interner(mode, "uint32")
    symbols = [interner.interned(obj) for obj in _elements(n)]

    def run():
        for symbol in symbols:
            interner.lookup(symbol)

    return timeit(run, number=1)


def bench_synchronized_overhead(n: int = NUM_OBJECTS_FOR_INTERNING) -> tuple[float, float]:
    """Compare bare vs synchronized interning on a single thread."""
    objects = _elements(n)

    def bare():
        interner = Interner(EfficiencyMode.TIME, "uint32")
        for obj in objects:
            interner.intern(obj)

    def synchronized():
        interner = SynchronizedInterner.efficient_for(EfficiencyMode.TIME, "uint32")
        for obj in objects:
            interner.intern(obj)

    return timeit(bare, number=1), timeit(synchronized, number=1)


if __name__ == "__main__":
    for mode in EfficiencyMode:
        print(f"Benchmark: interning {NUM_OBJECTS_FOR_INTERNING} objects [{mode.value}]")
        print(f"  time: {bench_interning(mode):.6f}s")
    for mode in EfficiencyMode:
        print(f"Benchmark: looking up {NUM_OBJECTS_FOR_LOOKUP} symbols [{mode.value}]")
        print(f"  time: {bench_lookup(mode):.6f}s")
    tbare, tsync = bench_synchronized_overhead()
    print("Benchmark: synchronized wrapper overhead (single thread)")
    print(f"  bare: {tbare:.6f}s  |  synchronized: {tsync:.6f}s")
