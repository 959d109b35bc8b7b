"""Envio do resumo do dia para um incoming webhook do Slack."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from app.protocols.notifier import NotifierProtocol
from app.services.event_digest import build_slack_message
from utils.errors import DeliveryError

logger = logging.getLogger(__name__)

_COMPONENT = "slack_webhook_notifier"


@dataclass
class WebhookClientConfig:
    """Configuracao do POST ao webhook."""

    timeout_seconds: float = 10.0


class SlackWebhookNotifier(NotifierProtocol):
    """Um unico POST por execucao, sem retry.

    A URL do webhook e injetada na construcao; o transport opcional
    permite usar httpx.MockTransport nos testes.
    """

    def __init__(
        self,
        *,
        webhook_url: str,
        title: str,
        config: WebhookClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not webhook_url or not webhook_url.strip():
            raise ValueError("webhook_url é obrigatório para envio ao Slack")
        self._webhook_url = webhook_url
        self._title = title
        self._config = config or WebhookClientConfig()
        self._transport = transport

    def notify(self, digest: str) -> None:
        message = build_slack_message(digest, self._title)
        response = self._post(message)
        logger.info(
            "slack_message_sent",
            extra={"component": _COMPONENT, "status_code": response.status_code},
        )

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        try:
            with httpx.Client(
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post(self._webhook_url, json=payload)
        except httpx.HTTPError as exc:
            # Nunca logar a URL: ela contem o segredo do webhook
            logger.error(
                "slack_webhook_connection_error",
                extra={"component": _COMPONENT, "error_type": type(exc).__name__},
            )
            raise DeliveryError("slack_webhook_connection_error") from exc

        if not response.is_success:
            logger.error(
                "slack_webhook_rejected",
                extra={
                    "component": _COMPONENT,
                    "status_code": response.status_code,
                    "body": response.text[:200],
                },
            )
            raise DeliveryError("slack_webhook_rejected", status_code=response.status_code)
        return response
