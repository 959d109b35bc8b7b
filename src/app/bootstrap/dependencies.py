"""Factories dos colaboradores concretos do relatorio diario."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.bootstrap.clients import (
    GOOGLE_SCOPES,
    create_calendar_service,
    create_google_credentials,
    create_sheets_service,
)
from app.infra.calendar import GoogleCalendarClient
from app.infra.sheets import GoogleSheetsClient, SheetsConfigStore, SheetsReportStore
from app.infra.slack import SlackWebhookNotifier, WebhookClientConfig
from app.use_cases.daily_report import DailyReportUseCase
from config.settings import (
    get_calendar_settings,
    get_sheets_settings,
    get_slack_settings,
)

if TYPE_CHECKING:
    from google.auth.credentials import Credentials

    from config.settings import CalendarSettings, SheetsSettings, SlackSettings


def create_credentials(settings: CalendarSettings | None = None) -> Credentials:
    calendar = settings or get_calendar_settings()
    return create_google_credentials(GOOGLE_SCOPES, calendar.google_service_account_json)


def create_calendar_source(
    credentials: Credentials,
    settings: CalendarSettings | None = None,
) -> GoogleCalendarClient:
    calendar = settings or get_calendar_settings()
    return GoogleCalendarClient(
        service=create_calendar_service(credentials),
        calendar_id=calendar.google_calendar_id,
        zone=calendar.zone,
    )


def create_sheets_client(
    credentials: Credentials,
    settings: SheetsSettings | None = None,
) -> GoogleSheetsClient:
    sheets = settings or get_sheets_settings()
    return GoogleSheetsClient(
        service=create_sheets_service(credentials),
        spreadsheet_id=sheets.spreadsheet_id,
    )


def create_notifier(settings: SlackSettings | None = None) -> SlackWebhookNotifier:
    slack = settings or get_slack_settings()
    return SlackWebhookNotifier(
        webhook_url=slack.webhook_url or "",
        title=slack.report_title,
        config=WebhookClientConfig(timeout_seconds=slack.request_timeout_seconds),
    )


def create_daily_report_use_case() -> DailyReportUseCase:
    """Monta o caso de uso com os adapters Google Calendar, Sheets e Slack."""
    calendar = get_calendar_settings()
    sheets = get_sheets_settings()
    credentials = create_credentials(calendar)
    sheets_client = create_sheets_client(credentials, sheets)
    return DailyReportUseCase(
        calendar_source=create_calendar_source(credentials, calendar),
        config_store=SheetsConfigStore(sheets_client, sheets.config_sheet_name),
        report_store=SheetsReportStore(sheets_client, sheets.report_sheet_name),
        notifier=create_notifier(),
        zone=calendar.zone,
    )
