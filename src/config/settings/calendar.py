"""Settings de integracao com Google Calendar.

Centralizar a leitura de env aqui evita espalhar parse de configuracao
pelos adapters e mantem o nucleo sem acesso a variaveis de ambiente.
"""

from __future__ import annotations

import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field

from config.settings._env import read_optional_env


class CalendarSettings(BaseModel):
    """Configuracoes do calendario lido pelo relatorio diario."""

    model_config = ConfigDict(extra="ignore")

    google_calendar_id: str = Field(
        default="primary",
        description="ID do calendario lido no Google Calendar.",
    )
    google_service_account_json: str | None = Field(
        default=None,
        description="Credencial JSON da service account; sem ela usa ADC.",
    )
    calendar_timezone: str = Field(
        default="Asia/Tokyo",
        description="Timezone que define o dia e os horarios do resumo.",
    )

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.calendar_timezone)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.google_calendar_id:
            errors.append("GOOGLE_CALENDAR_ID não pode ser vazio")
        try:
            ZoneInfo(self.calendar_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"CALENDAR_TIMEZONE inválido: {self.calendar_timezone}")
        return errors


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        google_calendar_id=os.getenv("GOOGLE_CALENDAR_ID", "primary"),
        google_service_account_json=read_optional_env("GOOGLE_SERVICE_ACCOUNT_JSON"),
        calendar_timezone=os.getenv("CALENDAR_TIMEZONE", "Asia/Tokyo"),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["CalendarSettings", "get_calendar_settings"]
