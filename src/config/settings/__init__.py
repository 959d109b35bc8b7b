"""Agregador de settings do relatorio diario.

Re-exporta as settings de cada adapter. Organizacao por dominio para
isolamento de mudancas.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    get_base_settings,
)
from config.settings.calendar import (
    CalendarSettings,
    get_calendar_settings,
)
from config.settings.sheets import (
    SheetsSettings,
    get_sheets_settings,
)
from config.settings.slack import (
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    "BaseSettings",
    "CalendarSettings",
    "SheetsSettings",
    "SlackSettings",
    "get_base_settings",
    "get_calendar_settings",
    "get_sheets_settings",
    "get_slack_settings",
]
