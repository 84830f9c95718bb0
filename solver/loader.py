"""
solver/loader.py — wczytywanie zbiorów przesłanek z plików.

Publiczne API:
  load_premises(path)        -> PremiseSet   (wybór formatu po rozszerzeniu)
  load_premises_json(path)   -> PremiseSet
  load_premises_text(path)   -> PremiseSet
  PremiseSet                 przesłanki + opcjonalny wniosek
"""

from __future__ import annotations

import json
import logging
import pathlib
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

# Prefiksy linii z wnioskiem w formacie tekstowym
CONCLUSION_PREFIXES: tuple[str, ...] = ("∴", ":.")


@dataclass(slots=True)
class PremiseSet:
    """Zbiór przesłanek do dedukcji (formuły jako tekst, w kolejności wejściowej)."""
    case_id:    str
    premises:   list[str]  = field(default_factory=list)
    conclusion: str | None = None


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def load_premises_json(path: pathlib.Path) -> PremiseSet:
    """
    Wczytuje przesłanki z pliku JSON.

    Oczekiwany format::

        {
            "case_id":    "sylogizm-01",
            "premises":   ["(m ∧ ¬b) → j", "(f ∨ s) → m", "b → t", "f → ¬t", "f"],
            "conclusion": "j"
        }

    Pole `conclusion` jest opcjonalne.

    Raises:
        ValueError gdy plik nie ma poprawnej struktury.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Niepoprawny JSON w {path.name}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: oczekiwano obiektu JSON na najwyższym poziomie")

    premises = raw.get("premises")
    if not isinstance(premises, list) or not all(isinstance(p, str) for p in premises):
        raise ValueError(f"{path.name}: pole 'premises' musi być listą napisów")

    conclusion = raw.get("conclusion")
    if conclusion is not None and not isinstance(conclusion, str):
        raise ValueError(f"{path.name}: pole 'conclusion' musi być napisem")

    result = PremiseSet(
        case_id=str(raw.get("case_id", path.stem)),
        premises=list(premises),
        conclusion=conclusion or None,
    )
    logger.debug("Wczytano %d przesłanek z %s", len(result.premises), path)
    return result


# ---------------------------------------------------------------------------
# Tekst
# ---------------------------------------------------------------------------

def load_premises_text(path: pathlib.Path) -> PremiseSet:
    """
    Wczytuje przesłanki z pliku tekstowego: jedna formuła w linii.

    Puste linie i linie zaczynające się od '#' są pomijane.
    Linia zaczynająca się od '∴' lub ':.' zawiera wniosek.

    Przykład::

        # sylogizm
        f → ¬t
        f
        ∴ t

    Raises:
        ValueError gdy plik zawiera więcej niż jeden wniosek.
    """
    premises:   list[str]  = []
    conclusion: str | None = None

    for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        prefix = next((p for p in CONCLUSION_PREFIXES if text.startswith(p)), None)
        if prefix is None:
            premises.append(text)
            continue
        if conclusion is not None:
            raise ValueError(f"{path.name}:{lineno}: więcej niż jeden wniosek")
        conclusion = text[len(prefix):].strip() or None

    logger.debug("Wczytano %d przesłanek z %s", len(premises), path)
    return PremiseSet(case_id=path.stem, premises=premises, conclusion=conclusion)


def load_premises(path: pathlib.Path) -> PremiseSet:
    """Wybiera format po rozszerzeniu: `.json` → JSON, pozostałe → tekst."""
    if path.suffix.lower() == ".json":
        return load_premises_json(path)
    return load_premises_text(path)
