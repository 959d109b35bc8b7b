"""Normalizer Google Calendar: extracao e normalizacao de eventos.

Responsabilidades:
- Extrair eventos das paginas de resposta de events.list
- Filtrar eventos rastreados (com horario, proprios ou aceitos)
- Normalizar para o modelo interno Event
"""

from .extractor import extract_calendar_events, is_tracked_event, viewer_status
from .normalizer import normalize_event, normalize_events

__all__ = [
    "extract_calendar_events",
    "is_tracked_event",
    "normalize_event",
    "normalize_events",
    "viewer_status",
]
