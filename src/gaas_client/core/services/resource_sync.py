"""Sincronización de recursos de un bundle (upload / update).

Dos ejes: cadenas sueltas vs. entradas completas, y upload vs. update.

Upload (`PUT`, reemplazo del conjunto de un idioma):
- Idioma origen: cada clave recibida se crea o reemplaza; las claves que ya
  existían y no vienen en el mapa se borran. Un valor sin cambios no
  vuelve a traducirse; uno nuevo o modificado se reenvía a todos los
  idiomas destino. Un mapa vacío borra todas las claves del idioma origen.
- Idioma destino: si aún no estaba configurado, se añade al bundle. Las
  claves que no existen en el origen se ignoran y las no mencionadas se
  dejan como están.

Update (`POST`, parche):
- Idioma origen: las claves no mencionadas no cambian, `None` borra la
  clave, un valor nuevo o distinto se crea y se (re)traduce.
- Idioma destino: falla si el idioma no está configurado en el bundle (solo
  upload añade destinos). Con `resync=True` el servidor recalcula todo el
  idioma a partir del origen; el delta, si lo hay, se aplica junto con la
  reconciliación, así que un delta vacío con `resync` es válido.

Todas estas reglas las aplica el servidor. El cliente se limita a elegir
verbo y ruta, preservar los `null` en el cuerpo y rechazar argumentos
inválidos antes de tocar la red.
"""

from __future__ import annotations

import logging
from typing import Mapping

from gaas_client.adapters.codec import encode_delta
from gaas_client.adapters.http_client import escape_path_segment
from gaas_client.core.domain.changes import NewResourceEntryData, ResourceEntryDataChangeSet
from gaas_client.core.domain.models import ServiceResponse
from gaas_client.core.errors import ServiceError, require
from gaas_client.core.interfaces.invoker import RequestInvoker

logger = logging.getLogger(__name__)

RESOURCE_ENTRIES_SEGMENT = "resourceEntries"


def _check_keys(values: Mapping[str, object], name: str) -> None:
    for key in values:
        if not isinstance(key, str) or not key:
            raise ServiceError.invalid_argument(f"{name} contains an empty or non-string key.")


def _check_strings(strings: Mapping[str, str | None] | None, name: str) -> None:
    if strings is None:
        raise ServiceError.invalid_argument(f"{name} must be specified.")
    _check_keys(strings, name)
    for key, value in strings.items():
        if value is not None and not isinstance(value, str):
            raise ServiceError.invalid_argument(f"{name}[{key!r}] must be a string or None.")


def _check_entries(
    entries: Mapping[str, object] | None,
    entry_type: type,
    name: str,
) -> None:
    if entries is None:
        raise ServiceError.invalid_argument(f"{name} must be specified.")
    _check_keys(entries, name)
    for key, value in entries.items():
        if value is not None and not isinstance(value, entry_type):
            raise ServiceError.invalid_argument(
                f"{name}[{key!r}] must be a {entry_type.__name__} or None."
            )


class ResourceSynchronizer:
    """Traduce deltas clave -> valor al verbo y la ruta correctos."""

    def __init__(self, invoker: RequestInvoker, instance_id: str) -> None:
        self._invoker = invoker
        self._instance_id = instance_id

    def _language_path(self, bundle_id: str, language: str, *extra: str) -> str:
        require(bundle_id, "bundle_id")
        require(language, "language")
        segments = (self._instance_id, "v2", "bundles", bundle_id, language, *extra)
        return "/".join(escape_path_segment(s) for s in segments)

    def _send(self, method: str, path: str, payload: bytes, resync: bool = False) -> None:
        query = {"resync": "true"} if resync else None
        self._invoker.invoke_json(method, path, ServiceResponse, query=query, payload=payload)

    def upload_resource_strings(
        self,
        bundle_id: str,
        language: str,
        strings: Mapping[str, str],
    ) -> None:
        """Reemplaza el conjunto de cadenas de `language` (`PUT`).

        Un mapa vacío es válido: en el idioma origen borra todas las claves.
        """

        path = self._language_path(bundle_id, language)
        _check_strings(strings, "strings")
        logger.debug("Uploading %d strings to %s/%s", len(strings), bundle_id, language)
        self._send("PUT", path, encode_delta(strings))

    def upload_resource_entries(
        self,
        bundle_id: str,
        language: str,
        entries: Mapping[str, NewResourceEntryData],
    ) -> None:
        """Como `upload_resource_strings`, con entradas completas por clave."""

        path = self._language_path(bundle_id, language, RESOURCE_ENTRIES_SEGMENT)
        _check_entries(entries, NewResourceEntryData, "entries")
        logger.debug("Uploading %d entries to %s/%s", len(entries), bundle_id, language)
        self._send("PUT", path, encode_delta(entries))

    def update_resource_strings(
        self,
        bundle_id: str,
        language: str,
        strings: Mapping[str, str | None] | None = None,
        resync: bool = False,
    ) -> None:
        """Aplica un parche de cadenas (`POST`); `None` borra la clave.

        Sin `resync` el delta es obligatorio y no puede estar vacío.
        """

        path = self._language_path(bundle_id, language)
        if not strings:
            if not resync:
                raise ServiceError.invalid_argument("strings must be specified.")
            strings = {}
        _check_strings(strings, "strings")
        logger.debug(
            "Updating %d strings in %s/%s (resync=%s)", len(strings), bundle_id, language, resync
        )
        self._send("POST", path, encode_delta(strings), resync)

    def update_resource_entries(
        self,
        bundle_id: str,
        language: str,
        entries: Mapping[str, ResourceEntryDataChangeSet | None] | None = None,
        resync: bool = False,
    ) -> None:
        """Como `update_resource_strings`; `None` borra la entrada entera."""

        path = self._language_path(bundle_id, language, RESOURCE_ENTRIES_SEGMENT)
        if not entries:
            if not resync:
                raise ServiceError.invalid_argument("entries must be specified.")
            entries = {}
        _check_entries(entries, ResourceEntryDataChangeSet, "entries")
        logger.debug(
            "Updating %d entries in %s/%s (resync=%s)", len(entries), bundle_id, language, resync
        )
        self._send("POST", path, encode_delta(entries), resync)
