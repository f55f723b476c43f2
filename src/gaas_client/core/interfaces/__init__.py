"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El Core depende del contrato del invocador, no de httpx.
"""
