# tests/test_tables.py

import math
import dataclasses

import pytest

from digicalc.engines import tables as tb


def test_log_table_shape():
    t = tb.build_log_table(7)
    assert len(t) == 7
    assert t.factors[0] == 2.0
    assert t.factors[1] == pytest.approx(1.1, abs=1e-15)
    assert t.factors[6] == pytest.approx(1.000001, abs=1e-15)
    for f, lg in zip(t.factors, t.logs):
        assert lg == math.log(f)

def test_factors_shrink_geometrically():
    """Each level must correct less than the one before it."""
    t = tb.build_log_table(10)
    for a, b in zip(t.factors[:-1], t.factors[1:]):
        assert a > b > 1.0
    for a, b in zip(t.logs[1:-1], t.logs[2:]):
        assert a / b == pytest.approx(10.0, rel=0.05)

def test_exp_table_has_decade_entry():
    t = tb.build_exp_table(7)
    assert t.levels == 7
    assert len(t.factors) == len(t.logs) == 8
    assert t.factors[0] == 10.0
    assert t.logs[0] == math.log(10.0)
    assert t.logs[1] == math.log(2.0)
    assert t.factors[1:] == tb.build_log_table(7).factors

def test_trig_table():
    t = tb.build_trig_table(7)
    assert len(t) == 7
    assert t.steps[0] == 1.0
    assert t.angles[0] == pytest.approx(math.pi / 4, abs=1e-16)
    for s, a in zip(t.steps, t.angles):
        assert a == math.atan(s)
    assert t.steps[-1] == pytest.approx(1e-6, rel=1e-12)

def test_tables_are_frozen():
    t = tb.build_log_table(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.factors = (3.0,)

def test_table_validation():
    with pytest.raises(ValueError):
        tb.LogTable(factors=(2.0, 1.1), logs=(0.69,))
    with pytest.raises(ValueError):
        tb.LogTable(factors=(1.0,), logs=(0.0,))
    with pytest.raises(ValueError):
        tb.ExpTable(factors=(2.0, 1.1), logs=(0.69, 0.095))
    with pytest.raises(ValueError):
        tb.TrigTable(steps=(), angles=())
    with pytest.raises(ValueError):
        tb.log_factor(-1)
