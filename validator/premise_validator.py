"""
validator/premise_validator.py — walidator zbioru przesłanek przed dedukcją.

PremiseValidator.validate(premises, conclusion=None) -> ValidationReport

Etapy:
  A — składnia        (parse_formula dla każdej przesłanki i wniosku)
  B — duplikaty       (ta sama formuła kanoniczna więcej niż raz; ostrzeżenie)
  C — pokrycie        (zmienne wniosku nieobecne w przesłankach; ostrzeżenie)
"""

from __future__ import annotations

from logic import ErrorCode, Expression, FormulaSyntaxError, parse_formula

from .types import ValidationError, ValidationReport

# Limit zapisanych błędów; kolejne przesłanki są nadal parsowane
MAX_ERRORS = 20

_EXPECTED_FIX: dict[ErrorCode, str] = {
    ErrorCode.INVALID_CHARACTER: "Użyj małych liter a–z oraz spójników ¬/! ∧/& ∨/| →/>.",
    ErrorCode.UNBALANCED_OPEN:   "Dodaj brakujący nawias ')'.",
    ErrorCode.UNBALANCED_CLOSE:  "Usuń nadmiarowy nawias ')' albo dodaj '('.",
    ErrorCode.EMPTY_FORMULA:     "Wpisz formułę albo usuń pustą przesłankę / pusty nawias.",
    ErrorCode.MISSING_OPERATOR:  "Wstaw spójnik między operandami; zmienne są jednoliterowe.",
    ErrorCode.MISSING_OPERAND:   "Uzupełnij operand po obu stronach spójnika.",
}


def _syntax_error(exc: FormulaSyntaxError, path: str) -> ValidationError:
    return ValidationError(
        code=exc.code,
        path=path,
        message=str(exc),
        expected_fix=_EXPECTED_FIX.get(exc.code, "Popraw składnię formuły."),
        details={"formula": exc.formula, "position": exc.position, "character": exc.character},
    )


class PremiseValidator:
    """
    Walidator przesłanek.

    Użycie:
        report = PremiseValidator().validate(["f > !t", "f"], conclusion="t")
        if not report.is_valid:
            for e in report.errors:
                print(e.code, e.path, e.message)
    """

    def validate(
        self,
        premises: list[str],
        conclusion: str | None = None,
    ) -> ValidationReport:
        errors: list[ValidationError] = []
        warnings: list[str] = []
        parsed: list[Expression] = []
        sources: list[str] = []

        # A — składnia (parsujemy wszystkie przesłanki; zapisujemy najwyżej MAX_ERRORS błędów)
        suppressed = 0
        for i, formula in enumerate(premises):
            try:
                parsed.append(parse_formula(formula))
                sources.append(formula)
            except FormulaSyntaxError as e:
                if len(errors) < MAX_ERRORS:
                    errors.append(_syntax_error(e, f"/premises/{i}"))
                else:
                    suppressed += 1
        if suppressed:
            warnings.append(
                f"Przekroczono limit {MAX_ERRORS} błędów — nie wypisano {suppressed} kolejnych."
            )

        goal: Expression | None = None
        if conclusion is not None:
            try:
                goal = parse_formula(conclusion)
            except FormulaSyntaxError as e:
                errors.append(_syntax_error(e, "/conclusion"))

        # B — duplikaty
        self._stage_duplicates(parsed, sources, warnings)

        # C — pokrycie wniosku
        if goal is not None:
            self._stage_coverage(parsed, goal, warnings)

        return ValidationReport(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            parsed=parsed,
            sources=sources,
        )

    # ------------------------------------------------------------------

    def _stage_duplicates(
        self,
        parsed: list[Expression],
        sources: list[str],
        warnings: list[str],
    ) -> None:
        seen: dict[str, str] = {}
        for expression, source in zip(parsed, sources):
            canonical = str(expression)
            if canonical in seen:
                warnings.append(f"Powtórzona przesłanka: '{source}' (jak '{seen[canonical]}')")
            else:
                seen[canonical] = source

    def _stage_coverage(
        self,
        parsed: list[Expression],
        goal: Expression,
        warnings: list[str],
    ) -> None:
        known = {p for expression in parsed for p in expression.propositions()}
        missing = sorted({p for p in goal.propositions() if p not in known})
        if missing:
            warnings.append(
                f"Zmienne wniosku nie występują w przesłankach: {', '.join(missing)} "
                "— wniosek nie może zostać udowodniony."
            )
