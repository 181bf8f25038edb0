"""Contrato del cliente de settings de Docker Desktop.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- El admin recibe cualquier objeto que lo cumpla; los tests usan un fake
  que cuenta llamadas.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DesktopSettingsClient(Protocol):
    """Read-modify-write access to the daemon-owned settings store.

    Reglas de diseño:
    - Las operaciones de red son asíncronas; cancelarlas aborta la petición.
    - `set_flag` es pura y devuelve un snapshot nuevo.
    - Nunca se escribe un snapshot que no se leyó en la misma operación.
    """

    async def reset_cluster(self) -> None:
        """Ask the daemon to reset its Kubernetes cluster."""

        ...

    async def read_settings(self) -> dict[str, Any]:
        """Fetch the full settings document."""

        ...

    def set_flag(self, snapshot: dict[str, Any], flag_name: str, value: bool) -> tuple[dict[str, Any], bool]:
        """Return `(new_snapshot, changed)` with `flag_name` set to `value`."""

        ...

    async def write_settings(self, snapshot: dict[str, Any]) -> None:
        """Persist the full settings document."""

        ...
