"""Contrato do store de configuracao cor -> categoria."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class ConfigStoreProtocol(Protocol):
    """Tabela com cabecalho `Color, Category` e uma linha por cor."""

    def read_rows(self) -> list[Sequence[Any]]:
        """Retorna as linhas de dados (sem cabecalho) como pares (cor, categoria)."""
        ...
