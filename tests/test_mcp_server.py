"""Tests for numutil.mcp_server tool functions."""

import json

from numutil.mcp_server import number_facts, simplify_fraction, simplify_radical_expression


def test_simplify_fraction() -> None:
    data = json.loads(simplify_fraction(6, -8))
    assert data["numerator"] == -3
    assert data["denominator"] == 4
    assert data["text"] == "-3/4"
    assert data["decimal"] == -0.75
    assert data["reciprocal"] == "4/-3"


def test_simplify_fraction_zero_numerator_has_no_reciprocal() -> None:
    data = json.loads(simplify_fraction(0, 9))
    assert data["text"] == "0"
    assert data["reciprocal"] is None


def test_simplify_fraction_undefined() -> None:
    data = json.loads(simplify_fraction(7, 0))
    assert data["undefined"] is True
    assert data["decimal"] is None


def test_simplify_fraction_zero_over_zero() -> None:
    data = json.loads(simplify_fraction(0, 0))
    assert "error" in data


def test_number_facts() -> None:
    data = json.loads(number_facts(28))
    assert data["is_prime"] is False
    assert data["divisors"] == [1, 2, 4, 7, 14, 28]
    assert data["prime_factors"] == [2, 2, 7]


def test_simplify_radical_expression_full() -> None:
    data = json.loads(simplify_radical_expression(1, 64, 3))
    assert (data["coefficient"], data["radicand"], data["degree"]) == (4, 1, 3)
    assert data["changed"] is True


def test_simplify_radical_expression_single_step() -> None:
    data = json.loads(simplify_radical_expression(1, 8, 2, full=False))
    assert data["text"] == "2√2"


def test_simplify_radical_expression_degree_zero() -> None:
    data = json.loads(simplify_radical_expression(1, 8, 0))
    assert "error" in data
