"""Settings base do relatorio diario.

Configuracoes comuns a todos os adapters (nome do servico e nivel de log).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class BaseSettings:
    """Configuracoes base do sistema.

    Attributes:
        service_name: Nome do servico para logs
        log_level: Nivel minimo de log
    """

    service_name: str = "daily_timelog"
    log_level: str = "INFO"

    @property
    def has_valid_log_level(self) -> bool:
        return self.log_level.upper() in _VALID_LOG_LEVELS

    def validate(self) -> list[str]:
        """Valida configuracoes base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if not self.has_valid_log_level:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        return errors


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        service_name=os.getenv("SERVICE_NAME", "daily_timelog"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instancia cacheada de BaseSettings."""
    return _load_base_from_env()
