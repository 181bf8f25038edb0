"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console

from adapters.docker_desktop_client import DockerDesktopClient
from cli.ui_components import build_doctor_table
from core.config import AppSettings
from core.domain.errors import KubedeskError
from core.domain.platform import OperatingSystem
from core.locality import is_local_docker_desktop
from core.settings import KUBERNETES_ENABLED, get_flag

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

logger = logging.getLogger(__name__)


async def _check_settings(client: DockerDesktopClient) -> tuple[bool, str, bool | None]:
    try:
        snapshot = await client.read_settings()
    except KubedeskError as exc:
        return False, str(exc), None
    try:
        enabled = get_flag(snapshot, KUBERNETES_ENABLED)
    except KubedeskError as exc:
        return True, f"settings readable; {exc}", None
    return True, "OK", enabled


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    current_os = OperatingSystem.current()

    table = build_doctor_table()

    if current_os is None:
        table.add_row("Operating system", "FAIL", "Docker Desktop is not available on this platform")
    else:
        table.add_row("Operating system", "OK", current_os.label())

    docker_host = settings.docker_host or ""
    local = is_local_docker_desktop(docker_host, current_os.value if current_os else "")
    table.add_row("DOCKER_HOST", "OK" if local else "REMOTE", docker_host or "(unset: local daemon)")

    client = DockerDesktopClient(settings, os=current_os)
    table.add_row("Backend endpoint", "OK", client.endpoint)

    if local:
        reachable, detail, enabled = asyncio.run(_check_settings(client))
        table.add_row("Backend settings", "OK" if reachable else "FAIL", detail)
        if enabled is not None:
            table.add_row("Kubernetes", "ENABLED" if enabled else "DISABLED", "vm.kubernetes.enabled")
    else:
        logger.warning("DOCKER_HOST %s is not a local Docker Desktop; skipping backend checks", docker_host)
        table.add_row("Backend settings", "SKIPPED", "DOCKER_HOST is not the local Docker Desktop")

    _console.print(table)

    if not local:
        _console.print(
            "\n[yellow]Note:[/yellow] docker-desktop clusters can only be managed against the local daemon."
        )
