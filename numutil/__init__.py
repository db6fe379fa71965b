"""numutil – fractions, elementary number theory and radical simplification."""

from numutil.errors import UndefinedResultError
from numutil.number_util import (
    absolute_value,
    divisors,
    factorial,
    gcd,
    is_prime,
    lcm,
    prime_factors,
    reciprocal,
    simplify_radical,
    simplify_radical_fully,
    simplify_rational,
)
from numutil.radical import Radical
from numutil.rational import Rational

__all__ = [
    "Radical",
    "Rational",
    "UndefinedResultError",
    "absolute_value",
    "divisors",
    "factorial",
    "gcd",
    "is_prime",
    "lcm",
    "prime_factors",
    "reciprocal",
    "simplify_radical",
    "simplify_radical_fully",
    "simplify_rational",
]
