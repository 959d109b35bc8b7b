"""Bootstrap da aplicacao: inicializacao e wiring.

Este modulo e o composition root: configura logging, valida settings e
conecta implementacoes concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_sheets_settings,
    get_slack_settings,
)
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id da execucao.

    LOG_LEVEL invalido cai para INFO aqui; o erro e reportado depois por
    validate_runtime_settings, ja com logging configurado.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level if base.has_valid_log_level else DEFAULT_LOG_LEVEL,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(*, require_slack: bool = True) -> None:
    """Valida settings obrigatorias antes de qualquer IO.

    Execucao agendada nao tem como pedir dados ao usuario, entao qualquer
    erro interrompe em todos os ambientes.

    Raises:
        ConfigurationError: Com todos os problemas encontrados.
    """
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"calendar: {error}" for error in get_calendar_settings().validate())
    errors.extend(f"sheets: {error}" for error in get_sheets_settings().validate())
    if require_slack:
        errors.extend(f"slack: {error}" for error in get_slack_settings().validate())

    if not errors:
        logger.info("settings_validated", extra={"component": "bootstrap", "result": "ok"})
        return

    logger.error(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "error_count": len(errors),
            "errors": errors,
        },
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise ConfigurationError(f"Configuração inválida:\n{details}")
