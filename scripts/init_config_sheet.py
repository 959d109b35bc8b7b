#!/usr/bin/env python3
"""Cria e preenche a aba de configuracao de cores na planilha.

Escreve o cabecalho `Color, Category`, uma linha por cor de evento do
Google Calendar (1..11) mais `default`, e pinta cada celula com a cor
correspondente. Categorias ja preenchidas na coluna B sao mantidas.

Uso:
    SPREADSHEET_ID=... python scripts/init_config_sheet.py
    SPREADSHEET_ID=... python scripts/init_config_sheet.py --sheet-name cores
"""

from __future__ import annotations

import argparse

from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import create_credentials, create_sheets_client
from app.infra.sheets import SheetsConfigStore
from config.settings import get_sheets_settings


def initialize_config_sheet(sheet_name: str | None = None) -> int:
    sheets = get_sheets_settings()
    client = create_sheets_client(create_credentials(), sheets)
    store = SheetsConfigStore(client, sheet_name or sheets.config_sheet_name)
    return store.initialize()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--sheet-name",
        help="Nome da aba (padrao: CONFIG_SHEET_NAME ou 'config')",
    )
    args = parser.parse_args()

    initialize_app()
    validate_runtime_settings(require_slack=False)
    written = initialize_config_sheet(args.sheet_name)
    print(f"colors written: {written}")


if __name__ == "__main__":
    main()
