"""Modelos de dominio do relatorio diario."""

from app.domain.time_entry import (
    DEFAULT_COLOR_TAG,
    CategoryMap,
    DurationTotals,
    Event,
)

__all__ = [
    "DEFAULT_COLOR_TAG",
    "CategoryMap",
    "DurationTotals",
    "Event",
]
