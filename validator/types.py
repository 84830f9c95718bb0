"""
validator/types.py — struktury raportu walidacji przesłanek.

ValidationError — pojedynczy błąd z kodem, ścieżką JSON Pointer,
    komunikatem i mechaniczną instrukcją naprawy.
ValidationReport — wynik walidacji: is_valid, errors, warnings,
    sparsowane przesłanki.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from logic import ErrorCode, Expression


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:         stały identyfikator klasy błędu (ErrorCode)
    - path:         JSON Pointer do przesłanki, np. "/premises/3"
    - message:      czytelny opis błędu
    - expected_fix: krótka mechaniczna instrukcja naprawy
    - details:      opcjonalny słownik z dodatkowymi danymi (pozycja, znak)
    """

    code: ErrorCode
    path: str
    message: str
    expected_fix: str
    details: dict[str, Any] | None = None


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji zbioru przesłanek.

    - is_valid:  True gdy brak błędów (warnings nie wpływają)
    - errors:    lista błędów (ValidationError)
    - warnings:  lista komunikatów ostrzegawczych (str)
    - parsed:    poprawnie sparsowane przesłanki (w kolejności wejściowej)
    - sources:   teksty przesłanek odpowiadające `parsed`
    """

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    parsed: list[Expression] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
