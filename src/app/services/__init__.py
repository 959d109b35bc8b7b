"""Servicos de aplicacao do relatorio diario (sem IO direto)."""

from app.services.category_resolver import build_category_map, load_category_map
from app.services.duration_aggregator import aggregate_durations
from app.services.event_digest import (
    build_slack_message,
    format_event_line,
    render_event_digest,
)
from app.services.report_row import build_report_row, write_report

__all__ = [
    "aggregate_durations",
    "build_category_map",
    "build_report_row",
    "build_slack_message",
    "format_event_line",
    "load_category_map",
    "render_event_digest",
    "write_report",
]
