import pytest

from interner.interner import Interner
from interner.types.efficiency import EfficiencyMode

# Tests that request `mode` (or `interner`) run twice:
# 1) against the time-optimized storage (reverse index, O(1) lookups) ["time"]
# 2) against the space-optimized storage (forward map only, linear lookups) ["space"]
# Both modes must agree on every observable result.


@pytest.fixture(params=[EfficiencyMode.TIME, EfficiencyMode.SPACE], ids=["time", "space"])
def mode(request):
    return request.param


@pytest.fixture
def interner(mode):
    return Interner(mode, "uint32")


@pytest.fixture(autouse=True)
def _default_environment(monkeypatch):
    # Keep constructor defaults independent of the caller's shell.
    monkeypatch.delenv("INTERNER_EFFICIENCY", raising=False)
    monkeypatch.delenv("INTERNER_SYMBOL_WIDTH", raising=False)
