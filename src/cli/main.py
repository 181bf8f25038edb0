"""CLI principal (Typer).

Comandos:
- `create` / `delete`: ciclo de vida del cluster vía `ClusterController`.
- `doctor`: diagnóstico del entorno (DOCKER_HOST, socket del backend).

La CLI solo traduce argumentos, configura logging e imprime resultados; la
lógica vive en `core.services`.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Awaitable, Optional, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from cli.doctor import app as doctor_app
from cli.printers import NamePrinter
from cli.ui_components import print_error
from core.config import AppSettings
from core.domain.errors import DeadlineExceeded, KubedeskError
from core.domain.models import PRODUCT_DOCKER_DESKTOP, Cluster, Registry
from core.services.cluster_controller import ClusterController

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Create and delete local Kubernetes clusters.")
app.add_typer(doctor_app, name="doctor")

_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    handler = RichHandler(console=_err_console, show_time=False, show_path=False, rich_tracebacks=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(level.upper())


def build_controller(settings: AppSettings) -> ClusterController:
    return ClusterController.default(settings)


def _run(operation: str, awaitable: Awaitable[T], timeout: float | None) -> T:
    async def _bounded() -> T:
        if timeout is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise DeadlineExceeded(
                f"{operation} did not finish within {timeout:g}s",
                operation=operation,
                endpoint="",
            ) from exc

    try:
        return asyncio.run(_bounded())
    except KubedeskError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        message = Text(f"Error: invalid configuration: {_first_error(exc)}", style="bold red")
        _err_console.print(message, soft_wrap=True)
        raise typer.Exit(code=1) from exc


def _desired(product: str, name: Optional[str], registry: Optional[str] = None) -> tuple[Cluster, Registry | None]:
    try:
        cluster = Cluster.for_product(product, name)
        desired_registry = Registry(name=registry) if registry else None
    except ValidationError as exc:
        raise typer.BadParameter(_first_error(exc), param_hint="--product/--name/--registry") from exc
    return cluster, desired_registry


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg', 'invalid value')}" if location else error.get("msg", "invalid value")


def _printer(output: Optional[str], operation: str) -> NamePrinter:
    if output not in (None, "name"):
        raise typer.BadParameter("only '-o name' is supported", param_hint="--output")
    return NamePrinter(short_output=output == "name", operation=operation)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = _load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def create(
    product: str = typer.Option(PRODUCT_DOCKER_DESKTOP, "--product", help="Cluster backend."),
    name: Optional[str] = typer.Option(None, "--name", help="Cluster name (defaults per product)."),
    registry: Optional[str] = typer.Option(None, "--registry", help="Registry to connect to the cluster."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: name."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Deadline in seconds."),
) -> None:
    """Create a cluster (for docker-desktop: validate the local environment)."""

    printer = _printer(output, "created")
    settings = _load_settings()
    cluster, desired_registry = _desired(product, name, registry)

    controller = build_controller(settings)
    created = _run("create", controller.create(cluster, desired_registry), timeout)
    printer.print_obj(created, sys.stdout)


@app.command()
def delete(
    product: str = typer.Option(PRODUCT_DOCKER_DESKTOP, "--product", help="Cluster backend."),
    name: Optional[str] = typer.Option(None, "--name", help="Cluster name (defaults per product)."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format: name."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Deadline in seconds."),
) -> None:
    """Delete a cluster (for docker-desktop: reset it and disable Kubernetes)."""

    printer = _printer(output, "deleted")
    settings = _load_settings()
    cluster, _ = _desired(product, name)

    controller = build_controller(settings)
    deleted = _run("delete", controller.delete(cluster), timeout)
    printer.print_obj(deleted, sys.stdout)


def run() -> None:
    app()
