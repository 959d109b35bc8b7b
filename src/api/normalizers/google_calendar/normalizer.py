"""Normalizer Google Calendar: converte eventos da API para o modelo interno.

Mapeamento puro: nao filtra nem descarta eventos. A filtragem de all-day
e de participacao acontece antes, no extractor.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from app.domain.time_entry import DEFAULT_COLOR_TAG, Event

if TYPE_CHECKING:
    from collections.abc import Iterable
    from zoneinfo import ZoneInfo


def normalize_event(payload: dict[str, Any], zone: ZoneInfo) -> Event:
    """Converte um evento bruto em Event, com horarios no timezone informado."""
    return Event(
        title=str(payload.get("summary") or ""),
        start_time=_extract_event_datetime(payload.get("start"), zone),
        end_time=_extract_event_datetime(payload.get("end"), zone),
        color_tag=str(payload.get("colorId") or DEFAULT_COLOR_TAG),
    )


def normalize_events(payloads: Iterable[dict[str, Any]], zone: ZoneInfo) -> list[Event]:
    return [normalize_event(payload, zone) for payload in payloads]


def parse_google_datetime(value: Any, zone: ZoneInfo) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed.replace(tzinfo=zone) if parsed.tzinfo is None else parsed.astimezone(zone)


def _extract_event_datetime(value: Any, zone: ZoneInfo) -> datetime:
    if isinstance(value, dict):
        if parsed := parse_google_datetime(value.get("dateTime"), zone):
            return parsed
        if isinstance(value.get("date"), str):
            return datetime.fromisoformat(value["date"]).replace(tzinfo=zone)
    # Falhamos explicitamente para evitar mapear evento invalido como horario falso.
    raise ValueError("missing_event_datetime")
