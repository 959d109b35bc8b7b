"""Observabilidade: logs estruturados e metricas da execucao.

Uso:
    from app.observability import get_correlation_id, start_run
    from app.observability import record_latency, record_category_hours
"""

from app.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    start_run,
)
from app.observability.metrics import record_category_hours, record_latency

__all__ = [
    "get_correlation_id",
    "record_category_hours",
    "record_latency",
    "reset_correlation_id",
    "start_run",
]
