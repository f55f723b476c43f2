"""Permite `python -m gaas_client ...`."""

from __future__ import annotations

from gaas_client.cli.main import run

if __name__ == "__main__":
    run()
