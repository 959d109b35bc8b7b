"""Client concreto de Google Calendar para a leitura dos eventos do dia."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.google_calendar import extract_calendar_events, is_tracked_event
from app.infra.calendar.google_calendar_parsers import build_list_params
from app.infra.google_api import execute_logged
from app.protocols.calendar_source import CalendarSourceProtocol

if TYPE_CHECKING:
    from collections.abc import Iterator
    from datetime import date
    from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"
CALENDAR_READONLY_SCOPE = "https://www.googleapis.com/auth/calendar.readonly"


class GoogleCalendarClient(CalendarSourceProtocol):
    """Implementacao do protocolo de calendario usando API v3 do Google.

    O service e construido no bootstrap (googleapiclient.discovery.build)
    e injetado aqui, o que permite trocar por um fake nos testes.
    """

    __slots__ = ("_calendar_id", "_service", "_zone")

    def __init__(self, *, service: Any, calendar_id: str, zone: ZoneInfo) -> None:
        self._service = service
        self._calendar_id = calendar_id
        self._zone = zone

    def list_events(self, day: date) -> list[dict[str, Any]]:
        events = extract_calendar_events(self._iter_pages(day))
        tracked = [event for event in events if is_tracked_event(event)]
        logger.info(
            "calendar_events_fetched",
            extra={
                "component": _COMPONENT,
                "day": day.isoformat(),
                "fetched": len(events),
                "tracked": len(tracked),
            },
        )
        return tracked

    def _iter_pages(self, day: date) -> Iterator[dict[str, Any]]:
        page_token: str | None = None
        while True:
            params = build_list_params(self._calendar_id, day, self._zone, page_token)
            page = execute_logged(
                lambda params=params: self._service.events().list(**params),
                component=_COMPONENT,
                action="list_events",
            )
            yield page
            page_token = page.get("nextPageToken") if isinstance(page, dict) else None
            if not page_token:
                return
