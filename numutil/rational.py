"""Rational module – a numerator/denominator pair that need not be normalized."""

from __future__ import annotations

from dataclasses import dataclass

from numutil.errors import UndefinedResultError


@dataclass
class Rational:
    """A fraction ``numerator/denominator``.

    Nothing is enforced at construction.  A denominator of 0 marks the
    fraction as undefined; see :attr:`is_undefined`.
    """

    numerator: int
    denominator: int = 1

    @property
    def is_undefined(self) -> bool:
        return self.denominator == 0

    def decimal_value(self) -> float:
        if self.is_undefined:
            raise UndefinedResultError(f"Fraction {self.numerator}/0 is undefined")
        return self.numerator / self.denominator

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return "0" if self.numerator == 0 else f"{self.numerator}/{self.denominator}"
