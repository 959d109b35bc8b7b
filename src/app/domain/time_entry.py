"""Modelos de dominio do relatorio diario de tempo por categoria.

Esses contratos ficam no dominio para compartilhar dados entre servicos
sem acoplar regras de agregacao a detalhes do provider de calendario.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import BaseModel, ConfigDict, Field

# Cor atribuida a eventos sem colorId explicito no calendario.
DEFAULT_COLOR_TAG = "default"

CategoryMap = dict[str, str]
"""Cor do evento -> categoria configurada pelo usuario."""

DurationTotals = dict[str, float]
"""Categoria -> horas acumuladas, na ordem em que cada categoria apareceu."""


class Event(BaseModel):
    """Evento normalizado do calendario, imutavel apos construcao."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(default="", description="Titulo do evento.")
    start_time: datetime = Field(..., description="Data/hora de inicio do evento.")
    end_time: datetime = Field(..., description="Data/hora de fim do evento.")
    color_tag: str = Field(
        default=DEFAULT_COLOR_TAG,
        description="Identificador de cor do evento ou 'default'.",
    )

    @property
    def duration_hours(self) -> float:
        """Duracao em horas; negativa se o fim for anterior ao inicio."""
        return (self.end_time - self.start_time).total_seconds() / 3600


__all__ = [
    "DEFAULT_COLOR_TAG",
    "CategoryMap",
    "DurationTotals",
    "Event",
]
