"""Config store e report store sobre abas de uma planilha Google Sheets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.palette import DEFAULT_EVENT_COLOR, EVENT_COLORS, hex_to_rgb
from app.infra.sheets.google_sheets_client import a1_range
from app.protocols.config_store import ConfigStoreProtocol
from app.protocols.report_store import ReportStoreProtocol
from utils.errors import MissingStoreError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.palette import EventColor
    from app.infra.sheets.google_sheets_client import GoogleSheetsClient

logger = logging.getLogger(__name__)

CONFIG_HEADER = ["Color", "Category"]


class SheetsConfigStore(ConfigStoreProtocol):
    """Aba `config`: cabecalho Color, Category e uma linha por cor."""

    def __init__(self, client: GoogleSheetsClient, sheet_name: str = "config") -> None:
        self._client = client
        self._sheet_name = sheet_name

    def read_rows(self) -> list[Sequence[Any]]:
        if self._sheet_name not in self._client.sheet_ids():
            # Sem aba de configuracao nenhuma cor tem categoria; todos os eventos sao ignorados.
            logger.warning("config_sheet_missing", extra={"sheet": self._sheet_name})
            return []
        return self._client.read_values(a1_range(self._sheet_name, "A2:B"))

    def initialize(self, palette: Sequence[EventColor] = EVENT_COLORS) -> int:
        """Cria (se preciso) e preenche a aba com as cores da paleta.

        Escreve apenas a coluna Color e o fundo de cada celula; categorias
        ja preenchidas na coluna B sao preservadas.

        Returns:
            Quantidade de linhas de cor escritas.
        """
        colors = [*palette, DEFAULT_EVENT_COLOR]
        sheet_id = self._client.sheet_ids().get(self._sheet_name)
        if sheet_id is None:
            sheet_id = self._client.add_sheet(self._sheet_name)

        self._client.update_values(a1_range(self._sheet_name, "A1:B1"), [CONFIG_HEADER])
        self._client.update_values(
            a1_range(self._sheet_name, f"A2:A{len(colors) + 1}"),
            [[color.color_id] for color in colors],
        )
        self._client.batch_update([_background_request(sheet_id, colors)])
        logger.info(
            "config_sheet_initialized",
            extra={"sheet": self._sheet_name, "colors": len(colors)},
        )
        return len(colors)


class SheetsReportStore(ReportStoreProtocol):
    """Aba `data`: linha 1 com as categorias, uma linha por dia abaixo."""

    def __init__(self, client: GoogleSheetsClient, sheet_name: str = "data") -> None:
        self._client = client
        self._sheet_name = sheet_name

    def read_header(self) -> list[str]:
        if self._sheet_name not in self._client.sheet_ids():
            raise MissingStoreError(self._sheet_name)
        rows = self._client.read_values(a1_range(self._sheet_name, "1:1"))
        return [str(cell) for cell in rows[0]] if rows else []

    def append_row(self, values: list[Any]) -> None:
        self._client.append_row(a1_range(self._sheet_name, "A1"), values)


def _background_request(sheet_id: int, colors: list[EventColor]) -> dict[str, Any]:
    return {
        "updateCells": {
            "range": {
                "sheetId": sheet_id,
                "startRowIndex": 1,
                "endRowIndex": 1 + len(colors),
                "startColumnIndex": 0,
                "endColumnIndex": 1,
            },
            "rows": [
                {
                    "values": [
                        {"userEnteredFormat": {"backgroundColor": hex_to_rgb(color.hex_code)}}
                    ]
                }
                for color in colors
            ],
            "fields": "userEnteredFormat.backgroundColor",
        }
    }
