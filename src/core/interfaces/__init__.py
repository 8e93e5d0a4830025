"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Las operaciones del cliente dependen del contrato, no de httpx directamente.
"""
