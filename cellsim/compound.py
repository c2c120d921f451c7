"""Compounds: counts of the four prime elements and their stability."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

# Each element slot is weighted by its prime.
PRIMES = (2, 3, 5, 7)


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend."""
    return a - b * _trunc_div(a, b)


def _check_byte(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"genetic code byte out of range: {value}")
    return value


@dataclass
class Compound:
    """A compound made of counts of four elements.

    Negative counts appear only in masks, which describe the range of
    compositions a compound may have to fit well.
    """

    elements: list[int] = field(default_factory=lambda: [0, 0, 0, 0])
    id: int = 0
    mass: int = 0
    v_vert: int = 0
    v_horiz: int = 0
    internal_energy: int = 0
    stacked: Optional["Compound"] = None

    def __post_init__(self) -> None:
        self.elements = list(self.elements)
        if len(self.elements) != len(PRIMES):
            raise ValueError(f"a compound has exactly {len(PRIMES)} element counts")

    @classmethod
    def from_code(cls, code: int) -> "Compound":
        """Build a compound from one byte: two bits per element, 0 to 3 each."""
        _check_byte(code)
        return cls([(code >> shift) % 4 for shift in (0, 2, 4, 6)])

    @classmethod
    def mask(cls, code1: int, code2: int) -> "Compound":
        """Build a fit mask from two bytes: three bits per element, -3 to 4 each."""
        _check_byte(code1)
        _check_byte(code2)
        return cls(
            [
                code1 % 8 - 3,
                (code1 >> 4) % 8 - 3,
                code2 % 8 - 3,
                (code2 >> 4) % 8 - 3,
            ]
        )

    @property
    def sum(self) -> int:
        """Prime-weighted sum of the element counts."""
        return sum(count * prime for count, prime in zip(self.elements, PRIMES))

    @property
    def element_count(self) -> int:
        """Total number of elements in the compound."""
        return sum(self.elements)

    def activation_instability(self) -> int:
        """Instability coming from the weighted sum's remainders alone."""
        total = self.sum
        return sum(_trunc_mod(total, prime) for prime in PRIMES)

    def total_instability(self) -> int:
        """Activation instability plus the penalty for the compound's size."""
        count = self.element_count
        size_cost = count - 5 * (count != 0)
        if count > 10:
            size_cost += 2 * count
        if count > 1:
            size_cost += _trunc_div(count, 4) * _trunc_div(count - 2, 4)
        return self.activation_instability() + size_cost

    def product(self) -> int:
        """Product of the primes raised to their counts; negative counts add nothing."""
        result = 1
        for count, prime in zip(self.elements, PRIMES):
            result *= prime ** max(count, 0)
        return result