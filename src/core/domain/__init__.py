"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las formas de request/response (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo conceptos del servicio remoto.
"""
