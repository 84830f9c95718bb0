"""
validator — walidator zbioru przesłanek przed uruchomieniem dedukcji.

Interfejs publiczny:
    PremiseValidator  — główny walidator (etapy A–C)
    ValidationReport, ValidationError — typy raportu
    MAX_ERRORS        — limit błędów zapisywanych w raporcie

Typowe użycie:
    from validator import PremiseValidator

    report = PremiseValidator().validate(premises, conclusion="j")
    if not report.is_valid:
        for e in report.errors:
            print(e.code, e.path, e.message)
"""

from .types import ValidationError, ValidationReport
from .premise_validator import MAX_ERRORS, PremiseValidator

__all__ = [
    "ValidationError",
    "ValidationReport",
    "PremiseValidator",
    "MAX_ERRORS",
]
