"""Excecoes utilitarias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    DeliveryError,
    MissingStoreError,
)

__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "MissingStoreError",
]
