"""Cliente del backend de Docker Desktop (settings + reset de Kubernetes).

Docker Desktop expone una API HTTP privada sobre un unix socket:
- `POST /kubernetes/reset` resetea el cluster.
- `GET /settings` devuelve el documento completo de settings.
- `POST /settings` lo reemplaza entero (no acepta updates parciales).

Cada llamada abre su propio `httpx.AsyncClient`; no hay estado compartido
entre operaciones ni reintentos.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from adapters.http_client import build_backend_client
from core.config import AppSettings
from core.domain.errors import DeadlineExceeded, TransportError
from core.domain.platform import OperatingSystem
from core.settings import set_flag

logger = logging.getLogger(__name__)

RESET_PATH = "/kubernetes/reset"
SETTINGS_PATH = "/settings"


def default_backend_socket(os: OperatingSystem | None, home: Path | None = None) -> Path | None:
    """Path del socket del backend por SO (None donde no hay unix socket)."""

    home = home or Path.home()
    if os is OperatingSystem.DARWIN:
        return home / "Library" / "Containers" / "com.docker.docker" / "Data" / "backend.native.sock"
    if os is OperatingSystem.LINUX:
        return home / ".docker" / "desktop" / "backend.native.sock"
    return None


class DockerDesktopClient:
    """`DesktopSettingsClient` implementation over httpx."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        os: OperatingSystem | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._os = os if os is not None else OperatingSystem.current()
        self._transport = transport
        self._socket_path = self._settings.backend_socket or default_backend_socket(self._os)

    @property
    def endpoint(self) -> str:
        if self._settings.backend_url:
            return self._settings.backend_url
        if self._socket_path is not None:
            return f"unix://{self._socket_path}"
        return "<none>"

    async def reset_cluster(self) -> None:
        await self._request("reset-cluster", "POST", RESET_PATH)

    async def read_settings(self) -> dict[str, Any]:
        response = await self._request("read-settings", "GET", SETTINGS_PATH)
        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError(
                f"Docker Desktop returned invalid settings JSON: {exc}",
                operation="read-settings",
                endpoint=self.endpoint,
                status_code=response.status_code,
            ) from exc
        if not isinstance(payload, dict):
            raise TransportError(
                f"Docker Desktop returned settings of type {type(payload).__name__}, expected an object",
                operation="read-settings",
                endpoint=self.endpoint,
                status_code=response.status_code,
            )
        return payload

    def set_flag(self, snapshot: dict[str, Any], flag_name: str, value: bool) -> tuple[dict[str, Any], bool]:
        return set_flag(snapshot, flag_name, value)

    async def write_settings(self, snapshot: dict[str, Any]) -> None:
        await self._request("write-settings", "POST", SETTINGS_PATH, json=snapshot)

    def _client(self, operation: str) -> httpx.AsyncClient:
        if self._transport is None and not self._settings.backend_url and self._socket_path is None:
            raise TransportError(
                "no Docker Desktop backend socket on this platform; set KUBEDESK_BACKEND_URL",
                operation=operation,
                endpoint=self.endpoint,
            )
        return build_backend_client(self._settings, socket_path=self._socket_path, transport=self._transport)

    async def _request(self, operation: str, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s via %s", method, path, self.endpoint)
        try:
            async with self._client(operation) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise DeadlineExceeded(
                f"{operation}: Docker Desktop did not answer in time ({self.endpoint})",
                operation=operation,
                endpoint=self.endpoint,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{operation}: cannot reach Docker Desktop at {self.endpoint}: {exc}. Is Docker Desktop running?",
                operation=operation,
                endpoint=self.endpoint,
            ) from exc

        if response.status_code >= 400:
            detail = response.text.strip()[:200]
            raise TransportError(
                f"{operation}: Docker Desktop returned HTTP {response.status_code}: {detail}",
                operation=operation,
                endpoint=self.endpoint,
                status_code=response.status_code,
            )
        return response
