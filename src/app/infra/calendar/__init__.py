"""Adapter Google Calendar (fonte de eventos)."""

from app.infra.calendar.google_calendar_client import (
    CALENDAR_READONLY_SCOPE,
    GoogleCalendarClient,
)

__all__ = ["CALENDAR_READONLY_SCOPE", "GoogleCalendarClient"]
