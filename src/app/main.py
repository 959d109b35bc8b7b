"""Entrypoint do relatorio diario.

Disparo sem argumentos, pensado para agendamento (cron, Cloud Scheduler):

    daily-timelog
    python -m app

Configuracao somente por variaveis de ambiente (ver config/settings).
Codigo de saida 0 em sucesso, 1 em qualquer falha.
"""

from __future__ import annotations

import logging
import sys
import time
from datetime import datetime

from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import create_daily_report_use_case
from app.observability import record_latency, reset_correlation_id, start_run
from config.settings import get_calendar_settings

logger = logging.getLogger(__name__)


def run() -> None:
    """Executa o relatorio de hoje no timezone do calendario."""
    validate_runtime_settings()
    now = datetime.now(get_calendar_settings().zone)
    use_case = create_daily_report_use_case()
    result = use_case.execute(now.date(), now)
    logger.info(
        "daily_report_summary",
        extra={"totals": result.totals, "report_row": result.report_row},
    )


def main() -> int:
    token = start_run()
    started = time.perf_counter()
    try:
        initialize_app()
        run()
    except Exception:
        logger.exception("daily_report_failed")
        return 1
    finally:
        record_latency("daily_report", "run", (time.perf_counter() - started) * 1000)
        reset_correlation_id(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
