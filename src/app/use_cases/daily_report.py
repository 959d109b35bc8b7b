"""Caso de uso: relatorio diario de horas por categoria.

Sequencia fixa por execucao: buscar eventos -> normalizar -> carregar
configuracao -> agregar -> gravar linha -> notificar. Qualquer excecao
interrompe a execucao no ponto em que ocorreu; linhas ja gravadas nao
sao desfeitas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.normalizers.google_calendar import normalize_events
from app.observability import record_category_hours
from app.services.category_resolver import load_category_map
from app.services.duration_aggregator import aggregate_durations
from app.services.event_digest import render_event_digest
from app.services.report_row import write_report

if TYPE_CHECKING:
    from datetime import date, datetime
    from zoneinfo import ZoneInfo

    from app.domain.time_entry import DurationTotals, Event
    from app.protocols import (
        CalendarSourceProtocol,
        ConfigStoreProtocol,
        NotifierProtocol,
        ReportStoreProtocol,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyReportResult:
    """Resultado de uma execucao concluida."""

    day: date
    events: list[Event]
    totals: DurationTotals
    report_row: list[Any]


class DailyReportUseCase:
    """Orquestra os colaboradores injetados, sem conhecer os providers."""

    def __init__(
        self,
        *,
        calendar_source: CalendarSourceProtocol,
        config_store: ConfigStoreProtocol,
        report_store: ReportStoreProtocol,
        notifier: NotifierProtocol,
        zone: ZoneInfo,
    ) -> None:
        self._calendar_source = calendar_source
        self._config_store = config_store
        self._report_store = report_store
        self._notifier = notifier
        self._zone = zone

    def execute(self, day: date, now: datetime) -> DailyReportResult:
        """Gera e publica o relatorio de `day`.

        Args:
            day: Dia consultado no calendario.
            now: Timestamp gravado na primeira coluna da linha.

        Raises:
            MissingStoreError: Se a aba de relatorio nao existir.
            DeliveryError: Se o envio da notificacao falhar.
        """
        raw_events = self._calendar_source.list_events(day)
        events = normalize_events(raw_events, self._zone)

        category_map = load_category_map(self._config_store)
        totals = aggregate_durations(events, category_map)
        for category, hours in totals.items():
            record_category_hours(category, hours)

        report_row = write_report(totals, self._report_store, now)

        self._notifier.notify(render_event_digest(events))

        logger.info(
            "daily_report_completed",
            extra={
                "day": day.isoformat(),
                "events": len(events),
                "categories": len(totals),
            },
        )
        return DailyReportResult(day=day, events=events, totals=totals, report_row=report_row)
