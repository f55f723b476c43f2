"""Adaptadores: firma de credenciales, codec JSON e invocador HTTP (httpx)."""
