"""Excecoes do relatorio diario para falhas de configuracao e entrega."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Base para configuracao ausente ou invalida (settings, planilhas)."""


class MissingStoreError(ConfigurationError):
    """Aba esperada nao existe na planilha de destino."""

    def __init__(self, sheet_name: str) -> None:
        super().__init__(f"{sheet_name} sheet not found")
        self.sheet_name = sheet_name


class DeliveryError(RuntimeError):
    """Falha no envio da notificacao, sem dados sensiveis na mensagem."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
