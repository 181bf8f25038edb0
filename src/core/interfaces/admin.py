"""Contrato de los admins de cluster (uno por producto)."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from core.domain.models import Cluster, LocalRegistryHosting, Registry

LocalityCheck = Callable[[str | None, str], bool]


@runtime_checkable
class ClusterAdmin(Protocol):
    """Lifecycle operations the cluster controller drives."""

    async def ensure_installed(self) -> None:
        ...

    async def create(self, desired: Cluster, registry: Registry | None) -> None:
        ...

    async def delete(self, config: Cluster) -> None:
        ...

    async def local_registry_hosting(
        self, desired: Cluster, registry: Registry | None
    ) -> LocalRegistryHosting | None:
        ...
