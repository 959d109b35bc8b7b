"""Resumo legivel dos eventos do dia para o canal de mensagens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.time_entry import Event

TIME_RANGE_SEPARATOR = "〜"


def format_event_line(event: Event) -> str:
    """Formata `HH:MM〜HH:MM: titulo` (24h, com zero a esquerda)."""
    start = event.start_time.strftime("%H:%M")
    end = event.end_time.strftime("%H:%M")
    return f"{start}{TIME_RANGE_SEPARATOR}{end}: {event.title}"


def render_event_digest(events: Iterable[Event]) -> str:
    return "\n".join(format_event_line(event) for event in events)


def build_slack_message(digest: str, title: str) -> dict[str, Any]:
    """Monta o corpo Block Kit: cabecalho fixo e o resumo em bloco de codigo."""
    return {
        "blocks": [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": title, "emoji": True},
            },
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"```{digest}```"},
            },
        ]
    }
