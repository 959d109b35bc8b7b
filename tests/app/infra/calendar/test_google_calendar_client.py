"""Testes unitarios para o client de Google Calendar."""

from __future__ import annotations

import logging
from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest
from googleapiclient.errors import HttpError
from tests.fakes.fake_collaborators import google_event

from app.infra.calendar import GoogleCalendarClient
from app.infra.calendar.google_calendar_parsers import build_list_params, day_bounds

TOKYO = ZoneInfo("Asia/Tokyo")
DAY = date(2026, 10, 19)


def _build_http_error(status: int) -> HttpError:
    # Construimos apenas o atributo minimo lido pelo parser de status.
    response = SimpleNamespace(status=status, reason="error")
    return HttpError(resp=response, content=b"error")


def _build_client(pages: list[dict] | Exception) -> tuple[GoogleCalendarClient, MagicMock]:
    service = MagicMock()
    list_request = service.events.return_value.list.return_value
    list_request.execute.side_effect = pages
    client = GoogleCalendarClient(service=service, calendar_id="primary", zone=TOKYO)
    return client, service


def test_day_bounds_cover_whole_day_in_calendar_timezone() -> None:
    start, end = day_bounds(DAY, TOKYO)

    assert start.isoformat() == "2026-10-19T00:00:00+09:00"
    assert end.isoformat() == "2026-10-20T00:00:00+09:00"


def test_build_list_params_expands_recurring_events() -> None:
    params = build_list_params("primary", DAY, TOKYO, page_token="next-1")

    assert params == {
        "calendarId": "primary",
        "timeMin": "2026-10-19T00:00:00+09:00",
        "timeMax": "2026-10-20T00:00:00+09:00",
        "timeZone": "Asia/Tokyo",
        "singleEvents": True,
        "orderBy": "startTime",
        "pageToken": "next-1",
    }


def test_list_events_filters_untracked_events() -> None:
    tracked = google_event("focus", "2026-10-19T09:00:00+09:00", "2026-10-19T10:00:00+09:00")
    all_day = {"summary": "holiday", "start": {"date": "2026-10-19"}, "end": {"date": "2026-10-20"}}
    declined = google_event(
        "skip",
        "2026-10-19T11:00:00+09:00",
        "2026-10-19T12:00:00+09:00",
        attendees=[{"self": True, "responseStatus": "declined"}],
    )
    client, _ = _build_client([{"items": [tracked, all_day, declined]}])

    assert client.list_events(DAY) == [tracked]


def test_list_events_follows_pagination() -> None:
    first = google_event("a", "2026-10-19T09:00:00+09:00", "2026-10-19T10:00:00+09:00")
    second = google_event("b", "2026-10-19T10:00:00+09:00", "2026-10-19T11:00:00+09:00")
    client, service = _build_client(
        [{"items": [first], "nextPageToken": "p2"}, {"items": [second]}]
    )

    events = client.list_events(DAY)

    assert [e["summary"] for e in events] == ["a", "b"]
    calls = service.events.return_value.list.call_args_list
    assert len(calls) == 2
    assert "pageToken" not in calls[0].kwargs
    assert calls[1].kwargs["pageToken"] == "p2"


def test_list_events_propagates_http_error(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR)
    client, _ = _build_client(_build_http_error(403))

    with pytest.raises(HttpError):
        client.list_events(DAY)

    errors = [r for r in caplog.records if r.getMessage() == "google_api_http_error"]
    assert len(errors) == 1
    assert errors[0].status_code == 403
    assert errors[0].error_type == "HttpError"
