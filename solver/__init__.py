"""
solver — silnik dedukcji rachunku zdań.

Publiczne API:
  Deduction.from_strs(formulas)       stos przesłanek + ValueMap
  run(deduction, history)             → DeductionResult (punkt stały)
  check_conclusion(deduction, goal)   → Verdict
  substitute(expr, values)            podstawienie znanych wartości (w miejscu)
  extract_unit_fact(expr)             → (zmienna, wartość) | None
  simplify(expr)                      upraszczanie stałych (w miejscu)
  EvaluationHistory, Snapshot         historia rund
  load_premises(path)                 → PremiseSet
  ValueMap, Fact, Contradiction, ...  typy danych
"""

from .engine import (
    Deduction,
    check_conclusion,
    extract_unit_fact,
    run,
    simplify,
    substitute,
)
from .history import EvaluationHistory, Snapshot
from .loader import (
    PremiseSet,
    load_premises,
    load_premises_json,
    load_premises_text,
)
from .types import (
    Contradiction,
    ContradictionKind,
    DeductionResult,
    Fact,
    Status,
    Step,
    ValueMap,
    Verdict,
)

__all__ = [
    "Deduction",
    "check_conclusion",
    "extract_unit_fact",
    "run",
    "simplify",
    "substitute",
    "EvaluationHistory",
    "Snapshot",
    "PremiseSet",
    "load_premises",
    "load_premises_json",
    "load_premises_text",
    "Contradiction",
    "ContradictionKind",
    "DeductionResult",
    "Fact",
    "Status",
    "Step",
    "ValueMap",
    "Verdict",
]
