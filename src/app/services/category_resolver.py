"""Resolucao de cor do evento para categoria configurada pelo usuario."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from app.domain.time_entry import CategoryMap
    from app.protocols.config_store import ConfigStoreProtocol

logger = logging.getLogger(__name__)


def build_category_map(rows: Iterable[Sequence[Any]]) -> CategoryMap:
    """Monta o mapa cor -> categoria a partir de linhas (cor, categoria).

    Linha com categoria vazia ou ausente fica fora do mapa (cor nao
    configurada). Cor repetida sobrescreve a anterior.
    """
    category_map: CategoryMap = {}
    for row in rows:
        if len(row) < 2 or row[1] is None:
            continue
        category = str(row[1])
        if not category.strip():
            continue
        # O Sheets pode devolver numeros para a coluna Color
        category_map[str(row[0])] = category
    return category_map


def load_category_map(store: ConfigStoreProtocol) -> CategoryMap:
    """Le o config store uma vez e devolve o mapa da execucao."""
    category_map = build_category_map(store.read_rows())
    logger.info(
        "category_map_loaded",
        extra={"colors": len(category_map), "mapping": dict(category_map)},
    )
    return category_map
