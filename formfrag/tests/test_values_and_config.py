"""
Numeric value detection and environment configuration.

Why:
    Numeric inputs accept numeric strings typed by users, so the detection
    rules decide which submissions are rejected. Configuration errors must
    name the offending variable instead of failing deep inside rendering.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from formfrag.config import load_render_config
from formfrag.values import is_numeric, to_decimal


@pytest.mark.parametrize(
    "value", [0, -3, 4.5, Decimal("1.10"), "42", "-0.5", "+.5", "4.", "1e3", " 7 "]
)
def test_numeric_values(value) -> None:
    assert is_numeric(value)


@pytest.mark.parametrize(
    "value",
    [
        False, True, None, "", " ", "abc", "1,5", "0x1A", "1_000", "inf", "NaN",
        float("inf"), object(), "1e1000000", 10**400,
    ],
)
def test_non_numeric_values(value) -> None:
    assert not is_numeric(value)


def test_to_decimal_uses_shortest_float_repr() -> None:
    assert to_decimal(1.005) == Decimal("1.005")
    assert to_decimal(" 2.50 ") == Decimal("2.50")
    assert to_decimal(7) == Decimal(7)


def test_load_render_config_defaults() -> None:
    assert load_render_config().default_decimals == 2


def test_load_render_config_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMFRAG_DEFAULT_DECIMALS", "3")
    assert load_render_config().default_decimals == 3


@pytest.mark.parametrize("raw", ["two", "-1", "21", "1.5"])
def test_load_render_config_invalid(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("FORMFRAG_DEFAULT_DECIMALS", raw)
    with pytest.raises(ValueError) as excinfo:
        load_render_config()
    assert "FORMFRAG_DEFAULT_DECIMALS" in str(excinfo.value)
