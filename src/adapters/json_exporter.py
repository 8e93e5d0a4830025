"""Exportación JSON de respuestas del API.

Por qué JSON:
- Permite guardar la respuesta cruda (envelope completo) para auditoría o
  para otras herramientas, sin depender del render de la CLI.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def export_payload_json(*, payload: Any, output_path: Path) -> Path:
    """Exporta el payload a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
