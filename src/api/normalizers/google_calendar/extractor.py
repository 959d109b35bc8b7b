"""Extrator de eventos da resposta de events.list da Google Calendar API.

Campos lidos de cada evento:
- start/end: {"dateTime": ...} para eventos com horario, {"date": ...} para all-day
- status: confirmed, tentative, cancelled
- organizer.self e attendees[].self/responseStatus para a participacao do usuario
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from collections.abc import Iterable

ViewerStatus = Literal["owner", "accepted", "tentative", "declined", "needsAction"]

TRACKED_VIEWER_STATUSES: frozenset[str] = frozenset({"owner", "accepted"})


def extract_calendar_events(pages: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Concatena os `items` de cada pagina da resposta, na ordem recebida."""
    events: list[dict[str, Any]] = []
    for page in pages:
        items = page.get("items") if isinstance(page, dict) else None
        if isinstance(items, list):
            events.extend(item for item in items if isinstance(item, dict))
    return events


def is_all_day_event(payload: dict[str, Any]) -> bool:
    start = payload.get("start")
    return not (isinstance(start, dict) and start.get("dateTime"))


def viewer_status(payload: dict[str, Any]) -> ViewerStatus:
    """Status de participacao de quem le o calendario.

    Evento sem entrada `self` na lista de convidados pertence ao proprio
    calendario e conta como owner.
    """
    organizer = payload.get("organizer")
    if isinstance(organizer, dict) and organizer.get("self"):
        return "owner"
    attendees = payload.get("attendees") or []
    me = next((a for a in attendees if isinstance(a, dict) and a.get("self")), None)
    if me is None:
        return "owner"
    return me.get("responseStatus") or "needsAction"


def is_tracked_event(payload: dict[str, Any]) -> bool:
    """True para eventos com horario, nao cancelados, proprios ou aceitos."""
    if payload.get("status") == "cancelled":
        return False
    if is_all_day_event(payload):
        return False
    return viewer_status(payload) in TRACKED_VIEWER_STATUSES
