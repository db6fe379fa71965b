"""MCP Server – exposes the numutil helpers as tools for Cursor, Claude Desktop, etc."""

from __future__ import annotations

import json

from mcp.server.fastmcp import FastMCP

from numutil.errors import UndefinedResultError
from numutil.number_util import (
    divisors,
    is_prime,
    prime_factors,
    reciprocal,
    simplify_radical,
    simplify_radical_fully,
    simplify_rational,
)
from numutil.radical import Radical
from numutil.rational import Rational

mcp = FastMCP(
    name="numutil",
    instructions=(
        "numutil: reduce fractions, inspect integers (primality, divisors, "
        "prime factors) and simplify radical expressions."
    ),
)


@mcp.tool()
def simplify_fraction(numerator: int, denominator: int) -> str:
    """Reduce a fraction to lowest terms and report its reciprocal.

    Args:
        numerator: Numerator of the fraction.
        denominator: Denominator of the fraction.

    Returns:
        JSON string with the simplified fraction, its reciprocal and decimal value.
    """
    fraction = Rational(numerator, denominator)
    try:
        simplify_rational(fraction)
    except UndefinedResultError as exc:
        return json.dumps({"error": str(exc)})

    inverse = reciprocal(fraction)
    return json.dumps({
        "numerator": fraction.numerator,
        "denominator": fraction.denominator,
        "text": str(fraction),
        "undefined": fraction.is_undefined,
        "decimal": None if fraction.is_undefined else fraction.decimal_value(),
        "reciprocal": str(inverse) if not inverse.is_undefined else None,
    }, indent=2)


@mcp.tool()
def number_facts(n: int) -> str:
    """Return primality, divisors and prime factors of an integer.

    Args:
        n: The integer to inspect.

    Returns:
        JSON string with ``is_prime``, ``divisors`` and ``prime_factors``.
    """
    return json.dumps({
        "n": n,
        "is_prime": is_prime(n),
        "divisors": divisors(n),
        "prime_factors": prime_factors(n),
    }, indent=2)


@mcp.tool()
def simplify_radical_expression(coefficient: int, radicand: int, degree: int = 2, full: bool = True) -> str:
    """Simplify ``coefficient * radicand ** (1/degree)``.

    Args:
        coefficient: Coefficient in front of the root.
        radicand: Value under the root.
        degree: Root index; 0 is undefined.
        full: Extract factors until none remain (otherwise a single step).

    Returns:
        JSON string with the resulting coefficient, radicand and degree.
    """
    expression = Radical(coefficient, radicand, degree)
    if expression.is_undefined:
        return json.dumps({"error": "A radical of degree 0 is undefined"})

    result = simplify_radical_fully(expression) if full else simplify_radical(expression)
    return json.dumps({
        "coefficient": result.coefficient,
        "radicand": result.radicand,
        "degree": result.degree,
        "text": str(result),
        "changed": result != expression,
    }, indent=2)


def run_server() -> None:
    """Start the MCP server using stdio transport."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
