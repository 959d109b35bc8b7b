"""Settings da planilha Google Sheets (configuracao de cores e log diario)."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class SheetsSettings(BaseModel):
    """Configuracoes da planilha usada como config store e report store."""

    model_config = ConfigDict(extra="ignore")

    spreadsheet_id: str = Field(
        default="",
        description="ID da planilha (trecho da URL entre /d/ e /edit).",
    )
    config_sheet_name: str = Field(
        default="config",
        description="Aba com o mapeamento Color -> Category.",
    )
    report_sheet_name: str = Field(
        default="data",
        description="Aba que recebe uma linha por execucao.",
    )

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.spreadsheet_id:
            errors.append("SPREADSHEET_ID não configurado")
        if not self.config_sheet_name or not self.report_sheet_name:
            errors.append("Nomes de aba não podem ser vazios")
        return errors


def _load_sheets_from_env() -> SheetsSettings:
    return SheetsSettings(
        spreadsheet_id=os.getenv("SPREADSHEET_ID", "").strip(),
        config_sheet_name=os.getenv("CONFIG_SHEET_NAME", "config"),
        report_sheet_name=os.getenv("REPORT_SHEET_NAME", "data"),
    )


@lru_cache(maxsize=1)
def get_sheets_settings() -> SheetsSettings:
    """Retorna instancia cacheada de SheetsSettings."""
    return _load_sheets_from_env()


__all__ = ["SheetsSettings", "get_sheets_settings"]
