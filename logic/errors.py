"""
logic/errors.py — kody błędów i wyjątki parsera formuł.

FormulaSyntaxError       — formuła nie daje się sparsować (błąd odwracalny,
                           wywołujący decyduje: przerwać partię czy pominąć).
UnknownPropositionError  — odwołanie do zmiennej spoza ValueMap (błąd
                           programistyczny, nie jest łapany).
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stałe kody błędów parsera i mapy wartości."""

    # Znaki
    INVALID_CHARACTER    = "E_INVALID_CHARACTER"

    # Nawiasy
    UNBALANCED_OPEN      = "E_UNBALANCED_OPEN"
    UNBALANCED_CLOSE     = "E_UNBALANCED_CLOSE"

    # Struktura
    EMPTY_FORMULA        = "E_EMPTY_FORMULA"
    MISSING_OPERATOR     = "E_MISSING_OPERATOR"
    MISSING_OPERAND      = "E_MISSING_OPERAND"

    # ValueMap
    UNKNOWN_PROPOSITION  = "E_UNKNOWN_PROPOSITION"


class FormulaSyntaxError(ValueError):
    """
    Błąd składni formuły.

    - code:      klasa błędu (ErrorCode)
    - formula:   pełna formuła wejściowa
    - position:  0-based pozycja znaku w formule (None gdy nie dotyczy)
    - character: problematyczny znak (None gdy nie dotyczy)
    """

    def __init__(
        self,
        code:      ErrorCode,
        message:   str,
        formula:   str,
        position:  int | None = None,
        character: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code      = code
        self.message   = message
        self.formula   = formula
        self.position  = position
        self.character = character

    def __str__(self) -> str:
        where = f" (pozycja {self.position})" if self.position is not None else ""
        return f"{self.message}{where}: '{self.formula}'"


class UnknownPropositionError(LookupError):
    """Zmienna nie została zainicjowana w ValueMap — mapa zbudowana z innych przesłanek."""

    code = ErrorCode.UNKNOWN_PROPOSITION

    def __init__(self, proposition: str) -> None:
        super().__init__(
            f"Nieznana zmienna zdaniowa '{proposition}' — "
            "ValueMap nie została zbudowana z tych przesłanek"
        )
        self.proposition = proposition
