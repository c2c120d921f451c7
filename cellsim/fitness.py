"""Comparisons between compounds: differences, fit scores and display colours."""

from __future__ import annotations

import math

from .compound import Compound

# A summed element count outside this range makes a fit worse.
FIT_LOW = -2
FIT_HIGH = 6

BLACK = (0, 0, 0, 255)


def _as_char(value: int) -> int:
    """Wrap an integer to a signed byte."""
    return (value + 128) % 256 - 128


def difference(compound: Compound, other: Compound) -> Compound:
    """Return what must be added to ``other`` to make it equal to ``compound``."""
    return Compound(
        [_as_char(mine - theirs) for mine, theirs in zip(compound.elements, other.elements)]
    )


def fit_score(compound: Compound, other: Compound) -> int:
    """Score how badly two compounds fit together; lower is better.

    The counts of each element are summed, and every sum outside the range
    -2 to 6 adds one to the score.  Negative counts only occur in masks,
    which demand at least that many of an element.
    """
    return sum(
        not FIT_LOW <= _as_char(mine + theirs) <= FIT_HIGH
        for mine, theirs in zip(compound.elements, other.elements)
    )


def _channel(count: int) -> int:
    # Remainder keeps the dividend's sign; the byte channel then wraps.
    return int(math.fmod(count * 50, 255)) % 256


def color(compound: Compound) -> tuple[int, int, int, int]:
    """Return the RGBA colour a compound is drawn with, from its first three elements."""
    red, green, blue = (_channel(count) for count in compound.elements[:3])
    return (BLACK[0] + red) % 256, (BLACK[1] + green) % 256, (BLACK[2] + blue) % 256, BLACK[3]