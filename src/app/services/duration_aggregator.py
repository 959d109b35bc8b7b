"""Soma de horas por categoria a partir dos eventos do dia.

Eventos cuja cor nao tem categoria sao ignorados com um log WARNING;
uma cor nao configurada nunca interrompe a execucao.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.time_entry import CategoryMap, DurationTotals, Event

logger = logging.getLogger(__name__)


def aggregate_durations(events: Iterable[Event], category_map: CategoryMap) -> DurationTotals:
    """Acumula horas por categoria na ordem de entrada dos eventos.

    Args:
        events: Eventos normalizados do dia.
        category_map: Mapa cor -> categoria da execucao.

    Returns:
        Categoria -> horas, com as chaves na ordem em que cada categoria
        apareceu pela primeira vez. Categorias sem eventos nao aparecem.
    """
    totals: DurationTotals = {}
    for event in events:
        category = category_map.get(event.color_tag)
        if not category:
            logger.warning(
                "unmapped_color_skipped",
                extra={"title": event.title, "color_tag": event.color_tag},
            )
            continue

        duration_hours = event.duration_hours
        logger.info(
            "event_categorized",
            extra={
                "category": category,
                "title": event.title,
                "duration_hours": duration_hours,
            },
        )
        totals[category] = totals.get(category, 0.0) + duration_hours
        logger.info(
            "category_total_updated",
            extra={"category": category, "total_hours": totals[category]},
        )
    return totals
