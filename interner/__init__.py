# Core type aliases for the interner's data model.
# Values are plain hashable Python objects; symbols are issued by interners and
# stand in for them. Keep these aliases above the submodule imports below, the
# submodules import them from here.

from typing import Any, Hashable

# Anything that can be interned
Value = Hashable
# Raw integer backing a Symbol
RawId = int
# Options mapping accepted by the debug printer
Options = dict[str, Any]

from interner.errors import (  # noqa: E402
    InternerError,
    InternerOverflowError,
    InternerUnknownSymbol,
    InternerTypeError,
    InternerConfigError,
)
from interner.types.symbol import Symbol  # noqa: E402
from interner.types.efficiency import EfficiencyMode  # noqa: E402
from interner.protocol import InternerProtocol, InternerOps  # noqa: E402
from interner.interner import Interner  # noqa: E402
from interner.synchronized import SynchronizedInterner  # noqa: E402
from interner.erased import ErasedInterner, TypedValue  # noqa: E402

__all__ = [
    "Value",
    "RawId",
    "Options",
    "InternerError",
    "InternerOverflowError",
    "InternerUnknownSymbol",
    "InternerTypeError",
    "InternerConfigError",
    "Symbol",
    "EfficiencyMode",
    "InternerProtocol",
    "InternerOps",
    "Interner",
    "SynchronizedInterner",
    "ErasedInterner",
    "TypedValue",
]
