"""Chemical elements and the periodic table that names them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Element:
    """One element of a compound.

    ``red`` is the mass and scales the element's instability, ``green`` is the
    number of bonds it wants, ``blue`` its charge.  ``current_green`` and
    ``current_blue`` describe its present neighbourhood inside a compound.
    """

    red: int = 0
    green: int = 0
    blue: int = 0
    current_green: int = 0
    current_blue: int = 0
    name: str = ""

    def instability(self) -> int:
        """Return how unhappy the element is with its current neighbourhood."""
        bond_diff = self.green - self.current_green
        # Too few bonds is softened slightly, too many is penalised harder.
        bond_cost = 10 * bond_diff * bond_diff - 5 * bond_diff
        charge = abs(self.current_blue) - 2
        # Charges of magnitude 0, 1 and 2 cost nothing; beyond that it grows.
        charge_cost = charge + abs(charge)
        return (bond_cost + charge_cost) * self.red


@dataclass
class PeriodicTable:
    """An ordered collection of elements, also searchable by name."""

    _elements: list[Element] = field(default_factory=list)
    _by_name: dict[str, Element] = field(default_factory=dict)

    def add(self, element: Element) -> None:
        """Append an element; a later element with the same name wins lookups."""
        self._elements.append(element)
        self._by_name[element.name] = element

    def get(self, name: str) -> Element:
        """Return the element registered under ``name``; raise KeyError if none."""
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"no element named {name!r}") from None

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name