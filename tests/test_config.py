import numpy as np
import pytest

from interner.config import get_default_mode, get_default_width, resolve_width, value_from_env
from interner.errors import InternerConfigError
from interner.types.efficiency import EfficiencyMode


def test_defaults_without_environment():
    assert get_default_mode() is EfficiencyMode.TIME
    assert get_default_width() == np.dtype("uint32")


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("time", EfficiencyMode.TIME),
        ("space", EfficiencyMode.SPACE),
        ("SPACE", EfficiencyMode.SPACE),
        ("  space ", EfficiencyMode.SPACE),
        ("", EfficiencyMode.TIME),
    ],
)
def test_mode_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("INTERNER_EFFICIENCY", raw)
    assert get_default_mode() is expected


def test_bad_mode_in_environment(monkeypatch):
    monkeypatch.setenv("INTERNER_EFFICIENCY", "balanced")
    with pytest.raises(InternerConfigError):
        get_default_mode()


@pytest.mark.parametrize("raw", ["uint8", "uint16", "uint64", "int32"])
def test_width_from_environment(monkeypatch, raw):
    monkeypatch.setenv("INTERNER_SYMBOL_WIDTH", raw)
    assert get_default_width() == np.dtype(raw)


def test_bad_width_in_environment(monkeypatch):
    monkeypatch.setenv("INTERNER_SYMBOL_WIDTH", "float64")
    with pytest.raises(InternerConfigError):
        get_default_width()


def test_resolve_width_accepts_dtype_likes():
    assert resolve_width(np.uint16) == np.dtype("uint16")
    assert resolve_width("uint8") == np.dtype("uint8")
    assert resolve_width(np.dtype("int64")) == np.dtype("int64")


def test_value_from_env_blank_falls_back(monkeypatch):
    monkeypatch.setenv("INTERNER_TEST_VALUE", "   ")
    assert value_from_env("INTERNER_TEST_VALUE", "fallback") == "fallback"
    monkeypatch.delenv("INTERNER_TEST_VALUE")
    assert value_from_env("INTERNER_TEST_VALUE", "fallback") == "fallback"


def test_efficiency_mode_parse():
    assert EfficiencyMode.parse(EfficiencyMode.SPACE) is EfficiencyMode.SPACE
    with pytest.raises(InternerConfigError):
        EfficiencyMode.parse(1)
