"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gaas_client.core.domain.models import BundleData, ServiceInfo


def build_supported_translation_table(info: ServiceInfo) -> Table:
    """Pares origen -> destinos con traducción automática."""

    table = Table(title="Supported Machine Translation")
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Targets", style="white")
    for source in sorted(info.supported_translation):
        targets = ", ".join(sorted(info.supported_translation[source]))
        table.add_row(source, targets or "-")
    return table


def build_bundle_ids_table(bundle_ids: Iterable[str]) -> Table:
    table = Table(title="Bundles")
    table.add_column("Bundle ID", style="cyan", no_wrap=True)
    for bundle_id in sorted(bundle_ids):
        table.add_row(Text(bundle_id))
    return table


def build_bundle_panel(bundle_id: str, bundle: BundleData) -> Panel:
    """Panel con la metadata principal de un bundle."""

    body = Text()
    body.append("Source language: ", style="bold")
    body.append(f"{bundle.source_language}\n")
    body.append("Target languages: ", style="bold")
    body.append(", ".join(sorted(bundle.target_languages)) or "-")
    body.append("\nRead only: ", style="bold")
    body.append("yes" if bundle.read_only else "no")
    if bundle.partner:
        body.append("\nPartner: ", style="bold")
        body.append(bundle.partner)
    if bundle.metadata:
        body.append("\nMetadata:\n", style="bold")
        for key in sorted(bundle.metadata):
            body.append(f"- {key}: {bundle.metadata[key]}\n")
    if bundle.updated_by or bundle.updated_at:
        body.append(
            f"\nUpdated by {bundle.updated_by or '?'} at {bundle.updated_at or '?'}",
            style="dim",
        )
    return Panel(body, title=Text(bundle_id, style="bold cyan"), border_style="cyan")


def build_strings_table(bundle_id: str, language: str, strings: Mapping[str, str]) -> Table:
    table = Table(title=Text(f"{bundle_id} [{language}]"))
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key in sorted(strings):
        table.add_row(Text(key), Text(strings[key]))
    return table
