"""Protocolos e contratos dos colaboradores externos do relatorio."""

from .calendar_source import CalendarSourceProtocol
from .config_store import ConfigStoreProtocol
from .notifier import NotifierProtocol
from .report_store import ReportStoreProtocol

__all__ = [
    "CalendarSourceProtocol",
    "ConfigStoreProtocol",
    "NotifierProtocol",
    "ReportStoreProtocol",
]
