"""Settings do webhook do Slack que recebe o resumo do dia."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from config.settings._env import read_optional_env

DEFAULT_REPORT_TITLE = "今日の作業"


class SlackSettings(BaseModel):
    """Configuracoes de envio do resumo para o Slack."""

    model_config = ConfigDict(extra="ignore")

    webhook_url: str | None = Field(
        default=None,
        description="URL do incoming webhook do Slack.",
    )
    report_title: str = Field(
        default=DEFAULT_REPORT_TITLE,
        description="Titulo fixo do bloco de cabecalho da mensagem.",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout da requisicao HTTP ao webhook.",
    )

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.webhook_url:
            errors.append("SLACK_WEBHOOK_URL não configurado")
        elif not self.webhook_url.startswith("https://"):
            errors.append("SLACK_WEBHOOK_URL deve usar https")
        return errors


def _load_slack_from_env() -> SlackSettings:
    return SlackSettings(
        webhook_url=read_optional_env("SLACK_WEBHOOK_URL"),
        report_title=os.getenv("SLACK_REPORT_TITLE", DEFAULT_REPORT_TITLE),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instancia cacheada de SlackSettings."""
    return _load_slack_from_env()


__all__ = ["DEFAULT_REPORT_TITLE", "SlackSettings", "get_slack_settings"]
