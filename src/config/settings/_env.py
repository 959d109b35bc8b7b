"""Helpers de leitura de variaveis de ambiente compartilhados pelos settings."""

from __future__ import annotations

import os


def read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None
