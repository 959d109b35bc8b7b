"""Contrato de envio do resumo do dia para um canal de mensagens."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NotifierProtocol(Protocol):
    def notify(self, digest: str) -> None:
        """Envia o texto ja formatado.

        Raises:
            DeliveryError: Se o envio falhar.
        """
        ...
