"""Normalizers por provider: conversao de payloads externos para modelos internos.

Estrutura:
- google_calendar/: extractor e normalizer de eventos da Calendar API v3
"""

from .google_calendar import normalize_event, normalize_events

__all__ = [
    "normalize_event",
    "normalize_events",
]
