"""
solver/history.py — historia rund dedukcji (do pokazania toku rozumowania).

EvaluationHistory jest pasywnym rejestratorem: `run()` dopisuje po jednej
migawce na produktywną rundę (oraz opcjonalną migawkę przygotowania w
`setup`), warstwa prezentacji tylko czyta.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .types import Contradiction, Fact, Step

if TYPE_CHECKING:
    from .engine import Deduction


@dataclass(slots=True)
class Snapshot:
    """
    Stan dedukcji po jednej rundzie.

    - round:         numer rundy (od 1; 0 = przygotowanie)
    - deduction:     głęboka, niezależna kopia Deduction
    - facts:         fakty zapisane w tej rundzie
    - steps:         indeks przesłanki → reguły, które na niej zadziałały
    - contradiction: sprzeczność wykryta w tej rundzie
    """
    round:         int
    deduction:     Deduction
    facts:         list[Fact]                = field(default_factory=list)
    steps:         dict[int, set[Step]]      = field(default_factory=dict)
    contradiction: Contradiction | None      = None

    def steps_for(self, premise_index: int) -> list[Step]:
        """Reguły dla przesłanki w stałej kolejności (SUBSTITUTE przed EVALUATE)."""
        fired = self.steps.get(premise_index, set())
        return [s for s in Step if s in fired]

    def fact_for(self, premise_index: int) -> Fact | None:
        for fact in self.facts:
            if fact.premise_index == premise_index:
                return fact
        return None


class EvaluationHistory:
    """Uporządkowana sekwencja migawek; tylko dopisywanie."""

    def __init__(self) -> None:
        self._snapshots: list[Snapshot] = []
        self.initial: Deduction | None = None
        self.setup:   Snapshot | None  = None

    def push(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __getitem__(self, index: int) -> Snapshot:
        return self._snapshots[index]

    @property
    def last(self) -> Snapshot | None:
        return self._snapshots[-1] if self._snapshots else None
