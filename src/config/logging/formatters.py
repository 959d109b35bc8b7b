"""Formatter JSON com campos padronizados para todos os logs."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa para que a saida seja estavel entre execucoes
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON.

    Exemplo de output:
        {"asctime": "2026-02-02 10:30:00,123", "level": "INFO",
         "logger": "app.services.duration_aggregator",
         "message": "category_total_updated", "correlation_id": "abc-123",
         "service": "daily_timelog", "category": "meeting", "total_hours": 2.5}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
