"""Operaciones del servicio remoto (health, productos, sync).

Por qué un paquete:
- Agrupa un módulo por área del API, igual que el servicio la expone.
- Cada función recibe el transporte como primer argumento y devuelve el JSON
  de la respuesta sin modificar.
"""

from adapters.remote_api.health import get_health
from adapters.remote_api.products import get_products
from adapters.remote_api.sync import (
	get_failed_jobs,
	get_sync_history,
	get_sync_log,
	get_sync_status,
	retry_job,
	trigger_sync,
)

__all__ = [
	"get_failed_jobs",
	"get_health",
	"get_products",
	"get_sync_history",
	"get_sync_log",
	"get_sync_status",
	"retry_job",
	"trigger_sync",
]
