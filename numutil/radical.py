"""Radical module – coefficient·(radicand)^(1/degree) expressions."""

from __future__ import annotations

from dataclasses import dataclass

from numutil.errors import UndefinedResultError

_ROOT_SIGNS = {2: "√", 3: "∛", 4: "∜"}


@dataclass
class Radical:
    """A root expression such as ``2√3`` (coefficient 2, radicand 3, degree 2).

    A degree of 0 has no meaning and marks the radical as undefined.
    """

    coefficient: int
    radicand: int
    degree: int = 2

    @property
    def is_undefined(self) -> bool:
        return self.degree == 0

    def decimal_value(self) -> float:
        if self.is_undefined:
            raise UndefinedResultError("Radical of degree 0 is undefined")
        if self.radicand < 0:
            if self.degree % 2 == 0:
                raise ValueError(f"{self} has no real value")
            return -self.coefficient * (-self.radicand) ** (1.0 / self.degree)
        return self.coefficient * self.radicand ** (1.0 / self.degree)

    def __str__(self) -> str:
        if self.is_undefined:
            return "undefined"
        if self.coefficient == 1:
            prefix = ""
        elif self.coefficient == -1:
            prefix = "-"
        else:
            prefix = str(self.coefficient)

        sign = _ROOT_SIGNS.get(self.degree)
        if sign is not None:
            return f"{prefix}{sign}{self.radicand}"
        return f"{prefix}root[{self.degree}]({self.radicand})"
