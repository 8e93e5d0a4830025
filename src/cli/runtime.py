"""Plumbing compartido por los comandos: estado global, ejecución y salida.

Los comandos solo describen qué operación llamar y cómo pintarla; aquí se
abre el cliente HTTP, se traducen los errores a un exit code y se decide
entre JSON crudo y tablas Rich.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console, RenderableType
from rich.markup import escape

from adapters.http_client import build_async_client
from adapters.json_exporter import export_payload_json
from core.config import AppSettings

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

Operation = Callable[[httpx.AsyncClient], Awaitable[Any]]


@dataclass
class CliState:
    """Opciones globales resueltas en el callback de la app."""

    settings: AppSettings
    as_json: bool = False
    output: Path | None = None


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.find_root().obj
    if not isinstance(state, CliState):
        state = CliState(settings=AppSettings())
        ctx.find_root().obj = state
    return state


def _error_detail(exc: httpx.HTTPStatusError) -> str:
    try:
        body = exc.response.json()
    except ValueError:
        return exc.response.text.strip()[:200]
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return ""


def execute(state: CliState, operation: Operation) -> Any:
    """Ejecuta una operación sobre un cliente nuevo y devuelve el payload.

    Los errores de transporte terminan el comando con exit code 1.
    """

    async def _call() -> Any:
        async with build_async_client(state.settings) as client:
            return await operation(client)

    try:
        payload = asyncio.run(_call())
    except httpx.HTTPStatusError as exc:
        logger.debug("HTTP error", exc_info=True)
        detail = _error_detail(exc)
        err_console.print(
            f"[red]HTTP {exc.response.status_code}[/red] {exc.request.method} {exc.request.url}"
            + (f"\n{escape(detail)}" if detail else "")
        )
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        logger.debug("Transport error", exc_info=True)
        err_console.print(f"[red]Request failed:[/red] {exc.__class__.__name__}: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        err_console.print(f"[red]Invalid JSON response:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if state.output is not None:
        path = export_payload_json(payload=payload, output_path=state.output)
        err_console.print(f"[green]Saved response to:[/green] {path}")
    return payload


def print_raw(payload: Any) -> None:
    """Plain JSON on stdout, safe for pipes (no Rich markup or colors)."""

    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def emit(state: CliState, payload: Any, render: Callable[[Any], RenderableType]) -> None:
    """Imprime el payload como JSON (`--json`) o con el renderer Rich."""

    if state.as_json:
        print_raw(payload)
        return
    try:
        renderable = render(payload)
    except (ValidationError, KeyError, TypeError) as exc:
        # Respuesta con forma inesperada: se muestra tal cual.
        logger.warning("Unexpected response shape, printing raw JSON: %s", exc)
        print_raw(payload)
        return
    console.print(renderable)
    if isinstance(payload, dict) and payload.get("message"):
        console.print(f"[dim]{payload['message']}[/dim]")
