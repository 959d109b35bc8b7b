"""Client fino sobre a Google Sheets API v4 (values e batchUpdate)."""

from __future__ import annotations

import logging
from typing import Any

from app.infra.google_api import execute_logged

logger = logging.getLogger(__name__)

_COMPONENT = "google_sheets_client"
SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"


def a1_range(sheet_name: str, cells: str) -> str:
    """Monta notacao A1 com o nome da aba entre aspas simples."""
    escaped = sheet_name.replace("'", "''")
    return f"'{escaped}'!{cells}"


class GoogleSheetsClient:
    """Operacoes usadas pelos stores de configuracao e de relatorio."""

    __slots__ = ("_service", "_spreadsheet_id")

    def __init__(self, *, service: Any, spreadsheet_id: str) -> None:
        self._service = service
        self._spreadsheet_id = spreadsheet_id

    def sheet_ids(self) -> dict[str, int]:
        """Retorna titulo da aba -> sheetId."""
        response = execute_logged(
            lambda: self._service.spreadsheets().get(
                spreadsheetId=self._spreadsheet_id,
                fields="sheets.properties(sheetId,title)",
            ),
            component=_COMPONENT,
            action="get_spreadsheet",
        )
        sheets = response.get("sheets", []) if isinstance(response, dict) else []
        return {
            str(props.get("title")): int(props.get("sheetId", 0))
            for sheet in sheets
            if isinstance(props := sheet.get("properties"), dict)
        }

    def read_values(self, cells_range: str) -> list[list[Any]]:
        response = execute_logged(
            lambda: self._service.spreadsheets().values().get(
                spreadsheetId=self._spreadsheet_id,
                range=cells_range,
            ),
            component=_COMPONENT,
            action="read_values",
        )
        # A API omite `values` quando o intervalo esta vazio
        values = response.get("values", []) if isinstance(response, dict) else []
        return [list(row) for row in values]

    def append_row(self, cells_range: str, row: list[Any]) -> dict[str, Any]:
        return execute_logged(
            lambda: self._service.spreadsheets().values().append(
                spreadsheetId=self._spreadsheet_id,
                range=cells_range,
                valueInputOption="USER_ENTERED",
                insertDataOption="INSERT_ROWS",
                body={"values": [row]},
            ),
            component=_COMPONENT,
            action="append_row",
        )

    def update_values(self, cells_range: str, values: list[list[Any]]) -> dict[str, Any]:
        return execute_logged(
            lambda: self._service.spreadsheets().values().update(
                spreadsheetId=self._spreadsheet_id,
                range=cells_range,
                valueInputOption="RAW",
                body={"values": values},
            ),
            component=_COMPONENT,
            action="update_values",
        )

    def batch_update(self, requests: list[dict[str, Any]]) -> dict[str, Any]:
        return execute_logged(
            lambda: self._service.spreadsheets().batchUpdate(
                spreadsheetId=self._spreadsheet_id,
                body={"requests": requests},
            ),
            component=_COMPONENT,
            action="batch_update",
        )

    def add_sheet(self, title: str) -> int:
        """Cria uma aba e retorna o sheetId atribuido."""
        response = self.batch_update([{"addSheet": {"properties": {"title": title}}}])
        replies = response.get("replies", []) if isinstance(response, dict) else []
        sheet_id = int(replies[0]["addSheet"]["properties"]["sheetId"])
        logger.info(
            "sheet_created",
            extra={"component": _COMPONENT, "sheet": title, "sheet_id": sheet_id},
        )
        return sheet_id
