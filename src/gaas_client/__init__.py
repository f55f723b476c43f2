"""Cliente Python del servicio de gestión de traducciones (GaaS).

Uso típico::

    from gaas_client import ServiceClient

    with ServiceClient.from_settings() as client:
        client.upload_resource_strings("app", "en", {"menu.help": "Help"})
"""

from __future__ import annotations

from gaas_client.core.config import AppSettings
from gaas_client.core.domain.account import AuthScheme, ServiceAccount
from gaas_client.core.errors import ErrorKind, ServiceError
from gaas_client.core.services.service_client import ServiceClient

__all__ = [
    "AppSettings",
    "AuthScheme",
    "ErrorKind",
    "ServiceAccount",
    "ServiceClient",
    "ServiceError",
]

__version__ = "0.1.0"
