"""Contrato do log tabular que recebe uma linha por execucao."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ReportStoreProtocol(Protocol):
    """Store append-only alinhado pela linha de cabecalho."""

    def read_header(self) -> list[str]:
        """Retorna a linha 1 (chaves das colunas em ordem posicional).

        Raises:
            MissingStoreError: Se a tabela de destino nao existir.
        """
        ...

    def append_row(self, values: list[Any]) -> None:
        """Acrescenta uma linha apos a ultima linha com dados."""
        ...
