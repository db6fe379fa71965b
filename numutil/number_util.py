"""NumberUtil module – fraction normalization, elementary number theory and radical simplification.

Every function here is pure except :func:`simplify_rational`, which
normalizes its argument in place.
"""

from __future__ import annotations

import logging
import math

from numutil.errors import UndefinedResultError
from numutil.radical import Radical
from numutil.rational import Rational

logger = logging.getLogger(__name__)


# ── Fractions ────────────────────────────────────────────────────────

def simplify_rational(f: Rational) -> None:
    """Reduce *f* to lowest terms in place.

    The sign is moved onto the numerator so the denominator is never
    negative afterwards.  ``0/0`` has no lowest terms and raises
    :class:`UndefinedResultError`.
    """
    g = gcd(f.numerator, f.denominator)
    if g == 0:
        raise UndefinedResultError("Cannot simplify the undefined fraction 0/0")

    numerator = f.numerator // g
    denominator = f.denominator // g
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    f.numerator = numerator
    f.denominator = denominator


def reciprocal(f: Rational) -> Rational:
    """Return ``1/f`` as a new, unsimplified fraction.

    A zero numerator yields an undefined fraction rather than an error.
    """
    return Rational(f.denominator, f.numerator)


def absolute_value(f: Rational) -> Rational:
    """Return a new fraction with the absolute value of *f*."""
    return Rational(abs(f.numerator), abs(f.denominator))


# ── Number theory ────────────────────────────────────────────────────

def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    The result is never negative, and ``gcd(0, 0)`` is 0.
    """
    if a == b:
        return abs(a)
    while a != 0 and b != 0:
        a, b = b, a % b
    # one of the two is zero here, so the sum is the other
    return abs(a + b)


def lcm(a: int, b: int) -> int:
    """Least common multiple; never negative.  ``lcm(0, 0)`` is undefined."""
    g = gcd(a, b)
    if g == 0:
        raise UndefinedResultError("lcm(0, 0) is undefined")
    return abs(a // g * b)


def is_prime(n: int) -> bool:
    """Trial division by odd numbers up to the square root of *n*."""
    if n <= 1:
        return False
    if n % 2 == 0:
        return n == 2
    for i in range(3, math.isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True


def divisors(n: int) -> list[int]:
    """Return the positive divisors of ``|n|`` in ascending order.

    0 and 1 are their own single divisor: ``divisors(0) == [0]``.
    """
    n = abs(n)
    if n in (0, 1):
        return [n]

    result: list[int] = []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            result.append(i)
            # perfect squares would otherwise list their root twice
            if i != n // i:
                result.append(n // i)
    return sorted(result)


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``|n|`` in ascending order, with multiplicity.

    ``prime_factors(28) == [2, 2, 7]``; 0 and 1 have none.
    """
    n = abs(n)
    if n in (0, 1):
        return []

    small_primes = [2] + [i for i in range(3, math.isqrt(n) + 1, 2) if is_prime(i)]

    factors: list[int] = []
    for p in small_primes:
        if n == 1 or is_prime(n):
            break
        while n % p == 0:
            factors.append(p)
            n //= p

    if is_prime(n):
        factors.append(n)
    return sorted(factors)


def factorial(n: int) -> int:
    """Return ``n!``, or 0 when *n* is negative.

    Python integers do not overflow, so large results stay exact.  The
    recursion is as deep as *n*.
    """
    if n < 0:
        return 0
    return 1 if n in (0, 1) else n * factorial(n - 1)


# ── Radicals ─────────────────────────────────────────────────────────

def simplify_radical(r: Radical) -> Radical:
    """Extract one perfect-power factor from the radicand of *r*.

    Candidates run from ``floor(radicand ** (1/degree))`` down to 2 and the
    first ``i`` whose ``degree``-th power divides the radicand wins:
    ``2·√(8)`` has ``i = 2`` and becomes ``4·√2``.  The radicand is divided
    by ``i ** degree``, not by ``i`` alone, so the value is preserved:
    ``√12`` becomes ``2·√3`` where the plain "divides by i" rule would give
    ``3·√4``.  Only one step is taken;
    see :func:`simplify_radical_fully` for the fixed point.

    *r* itself is returned when there is nothing to extract, including a
    prime radicand and the undefined degree 0.
    """
    radicand, degree, coefficient = r.radicand, r.degree, r.coefficient
    logger.debug("Simplifying radical %s (radicand=%d, degree=%d)", r, radicand, degree)

    if is_prime(radicand):
        return r
    if degree == 0:
        logger.debug("Radical %r has degree 0 and is undefined", r)
        return r
    if radicand < 2 or degree < 0:
        return r

    nth_root = int(radicand ** (1.0 / degree))
    for i in range(nth_root, 1, -1):
        power = i**degree
        if radicand % power == 0:
            result = Radical(coefficient * i, radicand // power, degree)
            logger.debug("Extracted %d from %s, giving %s", i, r, result)
            return result
    return r


def simplify_radical_fully(r: Radical) -> Radical:
    """Apply :func:`simplify_radical` until the radical stops changing."""
    current = r
    while True:
        step = simplify_radical(current)
        if step == current:
            return current
        current = step
