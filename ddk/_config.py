"""Konfiguracja ddk — przez zmienne środowiskowe."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

ON_SYNTAX_ERROR_CHOICES: tuple[str, ...] = ("abort", "skip")
LOG_LEVEL_CHOICES:       tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_CONSOLE_WIDTH = 200


@dataclass(frozen=True, slots=True)
class Settings:
    console_width:   int
    log_level:       str
    on_syntax_error: str


def _console_width() -> int:
    raw = os.getenv("DDK_CONSOLE_WIDTH", str(DEFAULT_CONSOLE_WIDTH)).strip()
    try:
        width = int(raw)
    except ValueError:
        raise ValueError(f"DDK_CONSOLE_WIDTH musi być liczbą całkowitą (jest '{raw}')") from None
    if width <= 0:
        raise ValueError(f"DDK_CONSOLE_WIDTH musi być dodatnia (jest {width})")
    return width


def get_settings() -> Settings:
    """Odczytuje i sprawdza zmienne DDK_*; błędna wartość → ValueError z opisem."""
    on_error = os.getenv("DDK_ON_SYNTAX_ERROR", "abort").strip().lower()
    if on_error not in ON_SYNTAX_ERROR_CHOICES:
        raise ValueError(
            f"DDK_ON_SYNTAX_ERROR musi być jednym z: {', '.join(ON_SYNTAX_ERROR_CHOICES)} "
            f"(jest '{on_error}')"
        )
    log_level = os.getenv("DDK_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in LOG_LEVEL_CHOICES:
        raise ValueError(
            f"DDK_LOG_LEVEL musi być jednym z: {', '.join(LOG_LEVEL_CHOICES)} "
            f"(jest '{log_level}')"
        )
    return Settings(
        console_width   = _console_width(),
        log_level       = log_level,
        on_syntax_error = on_error,
    )


def get_console() -> Console:
    # Konsole powstają przy imporcie komend; błędną szerokość zgłasza main() przez get_settings()
    try:
        width = _console_width()
    except ValueError:
        width = DEFAULT_CONSOLE_WIDTH
    return Console(width=width)


def setup_logging(verbose: bool = False) -> None:
    """Logi silnika na stderr przez RichHandler; -v wymusza DEBUG."""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
