"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/mensajes en múltiples comandos.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.errors import KubedeskError, TransportError, WrongEnvironment


def build_doctor_table() -> Table:
    table = Table(title="kubedesk doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def print_error(console: Console, error: KubedeskError) -> None:
    """Imprime un error de dominio en una línea (más una pista si aplica)."""

    console.print(Text(f"Error: {error}", style="bold red"), soft_wrap=True)
    hint = error_hint(error)
    if hint:
        console.print(Text(hint, style="yellow"), soft_wrap=True)


def error_hint(error: KubedeskError) -> str | None:
    if isinstance(error, WrongEnvironment):
        return "Unset DOCKER_HOST (or point it at the local Docker Desktop) and retry."
    if isinstance(error, TransportError) and error.status_code is None:
        return f"Check that Docker Desktop is running and listening on {error.endpoint}."
    return None
