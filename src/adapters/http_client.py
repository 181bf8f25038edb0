"""Wrapper de httpx para el backend de Docker Desktop.

Por qué un wrapper:
- Estandariza timeouts, headers y el transporte (unix socket o URL).
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from core.config import AppSettings

# Host ficticio: con un unix socket httpx solo usa el path de la URL.
SOCKET_BASE_URL = "http://localhost"


def build_backend_client(
    settings: AppSettings | None = None,
    *,
    socket_path: Path | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` apuntando al backend.

    Prioridad:
    1) `transport` explícito (tests)
    2) `settings.backend_url` (HTTP plano)
    3) `socket_path` (unix socket)
    """

    settings = settings or AppSettings()
    headers = {
        "User-Agent": "kubedesk/0.1",
        "Accept": "application/json",
    }
    timeout = httpx.Timeout(settings.http_timeout_seconds)

    if transport is not None:
        base_url = settings.backend_url or SOCKET_BASE_URL
        return httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout, headers=headers)

    if settings.backend_url:
        return httpx.AsyncClient(base_url=settings.backend_url, timeout=timeout, headers=headers)

    if socket_path is None:
        raise ValueError("either settings.backend_url or socket_path is required")

    return httpx.AsyncClient(
        base_url=SOCKET_BASE_URL,
        transport=httpx.AsyncHTTPTransport(uds=str(socket_path)),
        timeout=timeout,
        headers=headers,
    )
