"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde (CLI/YAML) sin acoplar el Core a I/O.
- `apiVersion`/`kind` viajan con el objeto, de modo que la impresión
  (`kind.group/name`) no necesita conocer el tipo concreto.

Nota:
- Estos modelos describen *qué* cluster/registry se desea, no *cómo* se crea;
  eso lo decide el admin de cada producto.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

API_VERSION = "ctlptl.dev/v1alpha1"

PRODUCT_DOCKER_DESKTOP = "docker-desktop"


class Cluster(BaseModel):
    """Cluster deseado.

    Es entrada de solo lectura para los admins: ninguno lo muta.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: str = Field(
        default="Cluster",
        description="Kind del objeto (para impresión y serialización).",
    )
    api_version: str = Field(
        default=API_VERSION,
        alias="apiVersion",
        description="Grupo/versión del esquema.",
    )
    name: str = Field(
        default="",
        max_length=253,
        description="Nombre del cluster; vacío = nombre por defecto del producto.",
    )
    product: str = Field(
        ...,
        min_length=1,
        description="Backend que gestiona el cluster (p.ej. 'docker-desktop', 'kind').",
    )
    kubernetes_version: str | None = Field(
        default=None,
        alias="kubernetesVersion",
        description="Versión de Kubernetes deseada (si el backend la soporta).",
    )
    min_cpus: int | None = Field(
        default=None,
        alias="minCPUs",
        ge=0,
        description="CPUs mínimas para el runtime de contenedores.",
    )

    @classmethod
    def for_product(cls, product: str, name: str | None = None) -> "Cluster":
        """Build a cluster with the product's default name when none is given."""

        return cls(product=product, name=name or default_cluster_name(product))

    def get_name(self) -> str:
        return self.name


class Registry(BaseModel):
    """Registry de imágenes que se quiere conectar a un cluster."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: str = Field(default="Registry")
    api_version: str = Field(default=API_VERSION, alias="apiVersion")
    name: str = Field(..., min_length=1, max_length=253)
    host_port: int | None = Field(
        default=None,
        alias="port",
        ge=1,
        le=65535,
        description="Puerto del host donde escucha el registry.",
    )

    def get_name(self) -> str:
        return self.name


class LocalRegistryHosting(BaseModel):
    """Información `LocalRegistryHostingV1` publicada dentro del cluster."""

    model_config = ConfigDict(populate_by_name=True)

    host: str = Field(default="")
    from_container_runtime: str = Field(default="", alias="hostFromContainerRuntime")
    from_cluster_network: str = Field(default="", alias="hostFromClusterNetwork")
    help: str = Field(default="")


def default_cluster_name(product: str) -> str:
    if product == PRODUCT_DOCKER_DESKTOP:
        return "docker-desktop"
    return product
