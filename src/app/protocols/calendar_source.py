"""Contrato da fonte de eventos do calendario.

Mantemos apenas o protocolo aqui para permitir troca de provider sem
impactar o caso de uso do relatorio diario.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import date


@runtime_checkable
class CalendarSourceProtocol(Protocol):
    """Contrato para leitura dos eventos de um dia."""

    def list_events(self, day: date) -> list[dict[str, Any]]:
        """Retorna eventos brutos do dia, ja filtrados.

        Somente eventos com horario (nao all-day) em que o usuario e dono
        ou aceitou o convite.
        """
        ...
