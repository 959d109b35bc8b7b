"""Configuracao de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # No entrypoint, uma vez por execucao
    configure_logging(level="INFO", service_name="daily_timelog")

    # Em qualquer modulo
    logger = get_logger(__name__)
    logger.info("report_row_appended", extra={"columns": 3})

Campos obrigatorios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
