"""Testes para extracao e filtragem de eventos do Google Calendar."""

from __future__ import annotations

from tests.fakes.fake_collaborators import google_event

from api.normalizers.google_calendar import (
    extract_calendar_events,
    is_tracked_event,
    viewer_status,
)

START = "2026-10-19T09:00:00+09:00"
END = "2026-10-19T10:00:00+09:00"


def test_extract_calendar_events_concatenates_pages() -> None:
    pages = [{"items": [{"id": "1"}, {"id": "2"}]}, {}, {"items": [{"id": "3"}]}]

    assert [e["id"] for e in extract_calendar_events(pages)] == ["1", "2", "3"]


def test_own_event_without_attendees_is_tracked() -> None:
    assert viewer_status(google_event("solo", START, END)) == "owner"
    assert is_tracked_event(google_event("solo", START, END)) is True


def test_organizer_event_is_tracked() -> None:
    payload = google_event(
        "sync",
        START,
        END,
        organizer={"email": "me@example.com", "self": True},
        attendees=[{"email": "other@example.com", "responseStatus": "needsAction"}],
    )

    assert viewer_status(payload) == "owner"
    assert is_tracked_event(payload) is True


def test_accepted_invitation_is_tracked() -> None:
    payload = google_event(
        "invite",
        START,
        END,
        organizer={"email": "boss@example.com"},
        attendees=[{"email": "me@example.com", "self": True, "responseStatus": "accepted"}],
    )

    assert is_tracked_event(payload) is True


def test_declined_tentative_and_pending_invitations_are_not_tracked() -> None:
    for status in ("declined", "tentative", "needsAction"):
        payload = google_event(
            "invite",
            START,
            END,
            organizer={"email": "boss@example.com"},
            attendees=[{"email": "me@example.com", "self": True, "responseStatus": status}],
        )
        assert is_tracked_event(payload) is False, status


def test_all_day_event_is_not_tracked() -> None:
    payload = {"summary": "holiday", "start": {"date": "2026-10-19"}, "end": {"date": "2026-10-20"}}

    assert is_tracked_event(payload) is False


def test_cancelled_event_is_not_tracked() -> None:
    assert is_tracked_event(google_event("gone", START, END, status="cancelled")) is False
