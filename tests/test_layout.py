from __future__ import annotations

from sysbar.engine.layout import remaining_width


def test_subtracts_fixed_cells():
    assert remaining_width(120, 20, 30) == 70


def test_no_fixed_cells():
    assert remaining_width(80) == 80


def test_exact_fit_is_zero():
    assert remaining_width(50, 25, 25) == 0


def test_overflow_clamps_to_zero():
    assert remaining_width(40, 30, 30) == 0
