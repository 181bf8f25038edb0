"""Admin del cluster de Docker Desktop.

Docker Desktop es distinto de los demás productos: el control plane lo
gestiona el propio daemon, así que aquí no se aprovisiona nada. `create`
solo valida el entorno y `delete` resetea el cluster y apaga Kubernetes en
los settings del daemon.
"""

from __future__ import annotations

import logging
from typing import Callable

from core.domain.errors import UnsupportedFeature, WrongEnvironment
from core.domain.models import Cluster, LocalRegistryHosting, Registry
from core.interfaces.admin import LocalityCheck
from core.interfaces.settings_client import DesktopSettingsClient
from core.locality import is_local_docker_desktop
from core.settings import KUBERNETES_ENABLED

logger = logging.getLogger(__name__)


class DockerDesktopAdmin:
    """Manages the Kubernetes cluster bundled with Docker Desktop."""

    def __init__(
        self,
        *,
        docker_host: str | None,
        os: str,
        client_factory: Callable[[], DesktopSettingsClient],
        is_local: LocalityCheck = is_local_docker_desktop,
    ) -> None:
        self._docker_host = docker_host
        self._os = os
        self._client_factory = client_factory
        self._is_local = is_local

    async def ensure_installed(self) -> None:
        return None

    async def create(self, desired: Cluster, registry: Registry | None) -> None:
        if registry is not None:
            raise UnsupportedFeature("connecting a registry to docker-desktop is not supported")

        if not self._is_local(self._docker_host, self._os):
            raise WrongEnvironment(
                "docker-desktop clusters are only available on a local Docker Desktop. "
                f"Current DOCKER_HOST: {self._docker_host}",
                docker_host=self._docker_host,
                operation="create",
            )

        logger.debug("docker-desktop cluster %r is managed by the daemon; nothing to create", desired.name)

    async def local_registry_hosting(
        self, desired: Cluster, registry: Registry | None
    ) -> LocalRegistryHosting | None:
        return None

    async def delete(self, config: Cluster) -> None:
        if not self._is_local(self._docker_host, self._os):
            raise WrongEnvironment(
                f"docker-desktop cannot be deleted from DOCKER_HOST: {self._docker_host}",
                docker_host=self._docker_host,
                operation="delete",
            )

        client = self._client_factory()

        # Reset first: the daemon restart may rewrite settings on disk.
        logger.info("resetting docker-desktop Kubernetes cluster %r", config.name)
        await client.reset_cluster()

        settings = await client.read_settings()
        settings, changed = client.set_flag(settings, KUBERNETES_ENABLED, False)
        if not changed:
            logger.info("Kubernetes already disabled in Docker Desktop settings")
            return

        await client.write_settings(settings)
        logger.info("disabled Kubernetes in Docker Desktop settings")
