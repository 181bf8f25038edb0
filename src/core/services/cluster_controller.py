"""Cluster lifecycle orchestration.

The CLI never talks to an admin directly: it hands the desired `Cluster` to
the controller, which selects the admin registered for the cluster's product
and runs the lifecycle calls in order. Keeping the selection here makes the
flow reusable from tests or future entry points without re-wiring adapters.
"""

from __future__ import annotations

import logging
from typing import Mapping

from core.config import AppSettings
from core.domain.errors import UnsupportedFeature
from core.domain.models import PRODUCT_DOCKER_DESKTOP, Cluster, Registry
from core.domain.platform import OperatingSystem
from core.interfaces.admin import ClusterAdmin
from core.services.docker_desktop_admin import DockerDesktopAdmin

logger = logging.getLogger(__name__)


class ClusterController:
    """Dispatches lifecycle calls to the admin registered per product."""

    def __init__(self, admins: Mapping[str, ClusterAdmin]) -> None:
        self._admins = dict(admins)

    @classmethod
    def default(cls, settings: AppSettings | None = None) -> "ClusterController":
        """Controller wired with the real adapters."""

        from adapters.docker_desktop_client import DockerDesktopClient  # noqa: PLC0415

        settings = settings or AppSettings()
        current_os = OperatingSystem.current()
        docker_desktop = DockerDesktopAdmin(
            docker_host=settings.docker_host,
            os=current_os.value if current_os else "",
            client_factory=lambda: DockerDesktopClient(settings),
        )
        return cls({PRODUCT_DOCKER_DESKTOP: docker_desktop})

    @property
    def products(self) -> list[str]:
        return sorted(self._admins)

    def admin_for(self, cluster: Cluster) -> ClusterAdmin:
        admin = self._admins.get(cluster.product)
        if admin is None:
            known = ", ".join(self.products) or "none"
            raise UnsupportedFeature(f"unsupported cluster product {cluster.product!r} (supported: {known})")
        return admin

    async def create(self, cluster: Cluster, registry: Registry | None = None) -> Cluster:
        admin = self.admin_for(cluster)
        await admin.ensure_installed()
        logger.debug("creating cluster %r with product %s", cluster.name, cluster.product)
        await admin.create(cluster, registry)
        return cluster

    async def delete(self, cluster: Cluster) -> Cluster:
        admin = self.admin_for(cluster)
        logger.debug("deleting cluster %r with product %s", cluster.name, cluster.product)
        await admin.delete(cluster)
        return cluster
