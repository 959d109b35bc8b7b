"""Helpers compartilhados pelos clients das APIs Google (Calendar e Sheets)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from googleapiclient.errors import HttpError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None


def execute_logged(
    request_factory: Callable[[], Any],
    *,
    component: str,
    action: str,
) -> Any:
    """Executa uma requisicao da API e registra falhas HTTP antes de propagar.

    Sem retry: a execucao agendada seguinte e a nova tentativa.
    """
    try:
        return request_factory().execute()
    except HttpError as exc:
        logger.error(
            "google_api_http_error",
            extra={
                "component": component,
                "action": action,
                "status_code": http_status(exc),
                "error_type": type(exc).__name__,
            },
        )
        raise
