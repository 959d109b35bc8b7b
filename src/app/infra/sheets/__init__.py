"""Adapters Google Sheets (config store e report store)."""

from app.infra.sheets.google_sheets_client import SHEETS_SCOPE, GoogleSheetsClient, a1_range
from app.infra.sheets.sheets_stores import SheetsConfigStore, SheetsReportStore

__all__ = [
    "SHEETS_SCOPE",
    "GoogleSheetsClient",
    "SheetsConfigStore",
    "SheetsReportStore",
    "a1_range",
]
