"""Factories de clientes externos: credenciais e services das APIs Google.

A autenticacao vem do ambiente: JSON de service account em
GOOGLE_SERVICE_ACCOUNT_JSON ou Application Default Credentials.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import google.auth
from google.oauth2 import service_account
from googleapiclient.discovery import build

from app.infra.calendar import CALENDAR_READONLY_SCOPE
from app.infra.sheets import SHEETS_SCOPE

if TYPE_CHECKING:
    from google.auth.credentials import Credentials

logger = logging.getLogger(__name__)

GOOGLE_SCOPES: list[str] = [CALENDAR_READONLY_SCOPE, SHEETS_SCOPE]


def create_google_credentials(
    scopes: list[str],
    service_account_json: str | None = None,
) -> Credentials:
    """Carrega credenciais com os escopos pedidos.

    Args:
        scopes: Escopos OAuth necessarios.
        service_account_json: Conteudo JSON da service account; None usa ADC.
    """
    if service_account_json:
        logger.info("google_credentials_loaded", extra={"source": "service_account"})
        return service_account.Credentials.from_service_account_info(
            json.loads(service_account_json),
            scopes=scopes,
        )
    credentials, project = google.auth.default(scopes=scopes)
    logger.info("google_credentials_loaded", extra={"source": "adc", "project": project})
    return credentials


def create_calendar_service(credentials: Credentials) -> Any:
    return build("calendar", "v3", credentials=credentials, cache_discovery=False)


def create_sheets_service(credentials: Credentials) -> Any:
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)

