"""Helpers internos de montagem de consultas para a Google Calendar API."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo


def day_bounds(day: date, zone: ZoneInfo) -> tuple[datetime, datetime]:
    """Retorna [00:00 do dia, 00:00 do dia seguinte) no timezone do calendario."""
    start = datetime.combine(day, time.min, tzinfo=zone)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=zone)
    return start, end


def build_list_params(
    calendar_id: str,
    day: date,
    zone: ZoneInfo,
    page_token: str | None = None,
) -> dict[str, Any]:
    """Parametros de events.list para os eventos que tocam o dia.

    singleEvents expande recorrencias em ocorrencias individuais.
    """
    start, end = day_bounds(day, zone)
    params: dict[str, Any] = {
        "calendarId": calendar_id,
        "timeMin": start.isoformat(),
        "timeMax": end.isoformat(),
        "timeZone": zone.key,
        "singleEvents": True,
        "orderBy": "startTime",
    }
    if page_token:
        params["pageToken"] = page_token
    return params
