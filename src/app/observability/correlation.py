"""correlation_id por execucao do relatorio diario.

Cada disparo agendado gera um id novo; todos os logs da execucao
carregam o mesmo valor via CorrelationIdFilter.

Uso:
    token = start_run()
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o id da execucao atual ou string vazia fora de uma execucao."""
    return _correlation_id.get()


def start_run(correlation_id: str | None = None) -> Token[str]:
    """Marca o inicio de uma execucao, gerando um UUID v4 se nenhum for dado."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)
