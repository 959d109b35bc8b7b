"""Casos de uso (orquestracao sem IO direto)."""

from app.use_cases.daily_report import DailyReportResult, DailyReportUseCase

__all__ = ["DailyReportResult", "DailyReportUseCase"]
