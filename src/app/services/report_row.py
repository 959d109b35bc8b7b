"""Montagem e gravacao da linha diaria no report store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.time_entry import DurationTotals
    from app.protocols.report_store import ReportStoreProtocol

logger = logging.getLogger(__name__)

# Formato aceito pelo Sheets como data/hora com valueInputOption=USER_ENTERED
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

BLANK_CELL = ""


def build_report_row(
    header: list[str],
    totals: DurationTotals,
    timestamp: datetime,
) -> list[Any]:
    """Alinha os totais as colunas do cabecalho.

    A primeira coluna sempre recebe o timestamp, qualquer que seja o
    cabecalho. Coluna sem total correspondente fica em branco.
    """
    row: list[Any] = [totals.get(str(key), BLANK_CELL) for key in header[1:]]
    return [timestamp.strftime(TIMESTAMP_FORMAT), *row]


def write_report(
    totals: DurationTotals,
    store: ReportStoreProtocol,
    now: datetime,
) -> list[Any]:
    """Le o cabecalho, monta a linha e acrescenta ao store.

    Raises:
        MissingStoreError: Se a tabela de destino nao existir (antes de escrever).
    """
    header = store.read_header()
    row = build_report_row(header, totals, now)
    unmatched = [category for category in totals if category not in header[1:]]
    if unmatched:
        logger.warning("report_columns_missing", extra={"categories": unmatched})
    store.append_row(row)
    logger.info("report_row_appended", extra={"columns": len(row), "values": row})
    return row
