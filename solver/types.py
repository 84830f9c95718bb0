"""
solver/types.py — podstawowe typy danych silnika dedukcji.

ValueMap        — tablica faktów: zmienna → True / False / None (nieznana)
Fact            — fakt jednostkowy wyciągnięty z przesłanki
Contradiction   — sprzeczność w zbiorze przesłanek
DeductionResult — wynik pętli punktu stałego
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from logic import Expression, UnknownPropositionError


# ---------------------------------------------------------------------------
# ValueMap
# ---------------------------------------------------------------------------

class ValueMap:
    """
    Wartości zmiennych zdaniowych występujących w przesłankach.

    Klucze są ustalane przy budowie; odwołanie do klucza spoza mapy
    to błąd programistyczny (UnknownPropositionError), nie wartość domyślna.
    """

    __slots__ = ("_values",)

    def __init__(self, values: dict[str, bool | None] | None = None) -> None:
        self._values: dict[str, bool | None] = dict(values or {})

    @classmethod
    def from_expressions(cls, expressions: Iterable[Expression]) -> ValueMap:
        """Inicjuje każdą zmienną z przesłanek (również zagnieżdżonych) jako nieznaną."""
        values: dict[str, bool | None] = {}
        for expression in expressions:
            for prop in expression.propositions():
                values.setdefault(prop, None)
        return cls(values)

    def get(self, proposition: str) -> bool | None:
        if proposition not in self._values:
            raise UnknownPropositionError(proposition)
        return self._values[proposition]

    def set(self, proposition: str, value: bool) -> bool:
        """Zapisuje znaną wartość. Zwraca True gdy mapa się zmieniła."""
        if proposition not in self._values:
            raise UnknownPropositionError(proposition)
        if self._values[proposition] is value:
            return False
        self._values[proposition] = value
        return True

    def known(self) -> dict[str, bool]:
        return {p: v for p, v in self._values.items() if v is not None}

    def unknown(self) -> list[str]:
        return [p for p, v in self._values.items() if v is None]

    def items(self) -> Iterator[tuple[str, bool | None]]:
        return iter(self._values.items())

    def as_dict(self) -> dict[str, bool | None]:
        return dict(self._values)

    def __contains__(self, proposition: object) -> bool:
        return proposition in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueMap):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"ValueMap({self._values!r})"


# ---------------------------------------------------------------------------
# Fakty i sprzeczności
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Fact:
    """Fakt jednostkowy: przesłanka `premise_index` zwinęła się do `p` lub `¬p`."""
    proposition:   str
    value:         bool
    premise_index: int

    def __str__(self) -> str:
        return f"{self.proposition} = {'TRUE' if self.value else 'FALSE'}"


class ContradictionKind(StrEnum):
    CONFLICTING_FACTS = "conflicting_facts"
    FALSE_PREMISE     = "false_premise"


@dataclass(frozen=True, slots=True)
class Contradiction:
    """
    Sprzeczność w przesłankach.

    - CONFLICTING_FACTS: fakt jednostkowy przeczy znanej już wartości `proposition`
    - FALSE_PREMISE:     przesłanka `premise_index` zwinęła się do false
    """
    kind:          ContradictionKind
    premise_index: int
    proposition:   str | None = None

    def __str__(self) -> str:
        if self.kind is ContradictionKind.CONFLICTING_FACTS:
            return (
                f"sprzeczne fakty dla zmiennej '{self.proposition}' "
                f"(przesłanka #{self.premise_index + 1})"
            )
        return f"przesłanka #{self.premise_index + 1} jest fałszywa"


# ---------------------------------------------------------------------------
# Wyniki
# ---------------------------------------------------------------------------

class Step(StrEnum):
    """Reguła, która zadziałała na przesłance w danej rundzie."""
    SUBSTITUTE = "SUBSTITUTE"
    EVALUATE   = "EVALUATE"


class Status(StrEnum):
    STABLE        = "stable"
    CONTRADICTION = "contradiction"


class Verdict(StrEnum):
    PROVED       = "proved"
    DISPROVED    = "disproved"
    UNDETERMINED = "undetermined"


@dataclass(slots=True)
class DeductionResult:
    """
    Wynik `run()`.

    - status:        STABLE lub CONTRADICTION
    - rounds:        liczba produktywnych rund (bez końcowej rundy bez zmian)
    - values:        końcowe wartości zmiennych
    - contradiction: wykryta sprzeczność (None gdy STABLE)
    """
    status:        Status
    rounds:        int
    values:        dict[str, bool | None]
    contradiction: Contradiction | None = None

    @property
    def is_consistent(self) -> bool:
        return self.status is Status.STABLE
