# tests/test_logexp.py

import math

import pytest

import digicalc
from digicalc import CalcSpec, make_calculator
from digicalc.core.config import MAX_EXP_LIMIT
from digicalc.core.errors import DomainError, OutOfRangeError
from digicalc.engines import logexp

LN_INPUTS = [0.00000001, 0.001, 1.0, 1.1, 4.4, 9.99, 10, 11, 12.345, 15.873, 25.2332, 1.234e34]
EXP_INPUTS = [0, -1, 0.00000001, 0.001, 1.0, 1.1, 4.4, 9.99, 10, 11, 12.345, 15.873, 25.2332, 87.2332,
              1.234e-13, 9.999e-15, 230]


@pytest.mark.parametrize("x", LN_INPUTS)
def test_ln_matches_math(x):
    out = digicalc.ln(x)
    assert out.ok
    assert out.value == pytest.approx(math.log(x), abs=1e-9)

@pytest.mark.parametrize("x", [10.0, 100.0, 1e10, 1e300])
def test_ln_powers_of_ten(x):
    assert digicalc.ln(x).value == pytest.approx(math.log(x), abs=1e-9)

def test_ln_extreme_magnitudes():
    # normalization must survive the whole double range
    assert digicalc.ln(1.7e308).value == pytest.approx(math.log(1.7e308), rel=1e-12)
    assert digicalc.ln(5e-324).value == pytest.approx(math.log(5e-324), rel=1e-12)

def test_ln_one_is_a_value_not_an_error():
    """ln(1) and an error share the legacy sentinel 0, but only one of them is an error."""
    out = digicalc.ln(1.0)
    assert out.ok
    assert out.error is None
    assert out.value == pytest.approx(0.0, abs=1e-12)

@pytest.mark.parametrize("x", [0.0, -1.0, -1e-300, float("nan"), float("inf"), float("-inf")])
def test_ln_domain_errors(x):
    out = digicalc.ln(x)
    assert not out.ok
    assert out.error == "domain"
    assert out.sentinel == 0.0
    with pytest.raises(DomainError):
        out.unwrap()

def test_ln_debug_trace():
    out = digicalc.ln(12.345, debug=True)
    assert out.debug["exponent"] == 1
    assert len(out.debug["digits"]) == 7
    assert 9.99 < out.debug["residual"] < 10.0
    assert digicalc.ln(12.345).debug is None

def test_ln_shorter_table_is_still_close():
    calc = make_calculator(CalcSpec.like("laporte"))
    assert len(calc.log_table) == 6
    assert calc.ln(4.4).value == pytest.approx(math.log(4.4), abs=1e-9)


@pytest.mark.parametrize("x", EXP_INPUTS)
def test_exp_matches_math(x):
    out = digicalc.exp(x)
    assert out.ok
    assert out.value == pytest.approx(math.exp(x), rel=1e-9)

def test_exp_zero_is_one():
    assert digicalc.exp(0).value == pytest.approx(1.0, abs=1e-15)

@pytest.mark.parametrize("x", [0.5, 1.0, 4.4, 87.2332, 230.0])
def test_exp_reciprocal_symmetry(x):
    assert digicalc.exp(-x).value == 1.0 / digicalc.exp(x).value

@pytest.mark.parametrize("x", [231.0, -231.0, 1e10, float("inf")])
def test_exp_out_of_range(x):
    out = digicalc.exp(x)
    assert out.error == "out_of_range"
    assert out.sentinel == 0.0
    with pytest.raises(OutOfRangeError):
        out.unwrap()

def test_exp_nan_is_domain_error():
    assert digicalc.exp(float("nan")).error == "domain"

def test_exp_limit_is_configurable():
    calc = make_calculator(CalcSpec(exp_limit=10.0))
    assert calc.exp(10.0).ok
    assert calc.exp(10.5).error == "out_of_range"

def test_exp_decade_count():
    out = digicalc.exp(230, debug=True)
    assert out.debug["decades"] == 99
    assert out.debug["digits"][0] == 99
    assert len(out.debug["digits"]) == 8
    assert 0.0 <= out.debug["residual"] < math.log(1.000001)


@pytest.mark.parametrize("x", LN_INPUTS)
def test_exp_ln_round_trip(x):
    assert digicalc.exp(digicalc.ln(x).value).value == pytest.approx(x, rel=1e-9)

@pytest.mark.parametrize("preset", ["coarse", "fine"])
def test_presets_trade_precision(preset):
    calc = make_calculator(CalcSpec.like(preset))
    tol = 1e-5 if preset == "coarse" else 1e-11
    for x in (0.5, 2.0, 37.0):
        assert calc.ln(x).value == pytest.approx(math.log(x), abs=tol)
        assert calc.exp(x).value == pytest.approx(math.exp(x), rel=tol)

def test_exp_limit_cannot_exceed_double_range():
    with pytest.raises(ValueError):
        CalcSpec(exp_limit=1000.0)
    calc = make_calculator(CalcSpec(exp_limit=MAX_EXP_LIMIT))
    assert calc.exp(700.0).value == pytest.approx(math.exp(700.0), rel=1e-9)

@pytest.mark.parametrize("x", [800.0, -800.0])
def test_exp_overflow_is_out_of_range(x):
    out = logexp.exp(x, make_calculator().exp_table, limit=1000.0)
    assert out.error == "out_of_range"
    assert out.sentinel == 0.0
