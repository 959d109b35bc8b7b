"""Registro de metricas da execucao via structured logging.

As metricas saem como logs estruturados e podem ser agregadas depois
pelo sistema de logs do ambiente que agenda a execucao.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(component: str, operation: str, latency_ms: float) -> None:
    """Registra latencia de uma operacao.

    Args:
        component: Nome do componente (ex: "daily_report")
        operation: Nome da operacao (ex: "execute")
        latency_ms: Latencia em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
        },
    )


def record_category_hours(category: str, hours: float) -> None:
    """Registra o total de horas de uma categoria no dia."""
    logger.info(
        "metric_category_hours",
        extra={
            "metric_type": "gauge",
            "category": category,
            "hours": round(hours, 4),
        },
    )
