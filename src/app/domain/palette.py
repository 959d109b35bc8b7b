"""Paleta de cores de eventos do Google Calendar.

O colorId da API e a posicao (1-based) na paleta abaixo.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.time_entry import DEFAULT_COLOR_TAG


@dataclass(frozen=True)
class EventColor:
    color_id: str
    name: str
    hex_code: str


EVENT_COLORS: tuple[EventColor, ...] = (
    EventColor("1", "Lavender", "#7986CB"),
    EventColor("2", "Sage", "#33B679"),
    EventColor("3", "Grape", "#8E24AA"),
    EventColor("4", "Flamingo", "#E67C73"),
    EventColor("5", "Banana", "#F6BF26"),
    EventColor("6", "Tangerine", "#F4511E"),
    EventColor("7", "Peacock", "#039BE5"),
    EventColor("8", "Graphite", "#616161"),
    EventColor("9", "Blueberry", "#3F51B5"),
    EventColor("10", "Basil", "#0B8043"),
    EventColor("11", "Tomato", "#D50000"),
)

# Linha final da aba de configuracao, para eventos sem cor.
DEFAULT_EVENT_COLOR = EventColor(DEFAULT_COLOR_TAG, "White", "#FFFFFF")


def hex_to_rgb(hex_code: str) -> dict[str, float]:
    """Converte '#RRGGBB' no formato Color da API do Sheets (0.0 a 1.0)."""
    value = hex_code.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Cor hexadecimal invalida: {hex_code}")
    red, green, blue = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return {"red": red / 255, "green": green / 255, "blue": blue / 255}


__all__ = ["DEFAULT_EVENT_COLOR", "EVENT_COLORS", "EventColor", "hex_to_rgb"]
