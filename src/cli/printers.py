"""Impresión `kind[.group]/name[ operation]` de objetos.

Los tipos de kubedesk no tienen metadata completa de Kubernetes, así que el
nombre se resuelve probando capacidades en orden: `Named.get_name()`, luego
un accessor genérico de metadata (`obj.metadata.name` o un dict
`{"metadata": {"name": ...}}`).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TextIO, runtime_checkable

from core.domain.errors import MissingKind

UNKNOWN = "<unknown>"


@runtime_checkable
class Named(Protocol):
    def get_name(self) -> str:
        ...


@dataclass(frozen=True)
class GroupKind:
    group: str
    kind: str


@dataclass
class NamePrinter:
    """Prints the "resource/name" pair of an object.

    `short_output` drops the operation; `operation` (e.g. "created") is the
    action that took place on the object.
    """

    short_output: bool = False
    operation: str = ""

    def print_obj(self, obj: Any, out: TextIO) -> None:
        name = object_name(obj)
        print_name(out, name, self.operation, self.short_output, object_group_kind(obj))


def object_name(obj: Any) -> str:
    if isinstance(obj, Named):
        name = obj.get_name()
        if name:
            return name

    metadata = _metadata(obj)
    if metadata is not None:
        name = metadata.get("name") if isinstance(metadata, Mapping) else getattr(metadata, "name", None)
        if isinstance(name, str) and name:
            return name

    return UNKNOWN


def object_group_kind(obj: Any) -> GroupKind:
    if obj is None:
        return GroupKind(group="", kind=UNKNOWN)

    # Typed objects carry `kind` and `api_version` attributes.
    kind = getattr(obj, "kind", None)
    if isinstance(kind, str) and kind:
        return GroupKind(group=_group(getattr(obj, "api_version", "")), kind=kind)

    # Unstructured objects are plain mappings.
    if isinstance(obj, Mapping):
        kind = obj.get("kind")
        if isinstance(kind, str) and kind:
            return GroupKind(group=_group(obj.get("apiVersion", "")), kind=kind)

    return GroupKind(group="", kind=UNKNOWN)


def print_name(out: TextIO, name: str, operation: str, short_output: bool, group_kind: GroupKind) -> None:
    if not group_kind.kind or group_kind.kind == UNKNOWN:
        raise MissingKind(f"missing kind for resource with name {name}")

    suffix = f" {operation}" if operation and not short_output else ""
    kind = group_kind.kind.lower()
    if not group_kind.group:
        out.write(f"{kind}/{name}{suffix}\n")
        return
    out.write(f"{kind}.{group_kind.group}/{name}{suffix}\n")


def _metadata(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return obj.get("metadata")
    return getattr(obj, "metadata", None)


def _group(api_version: Any) -> str:
    # "ctlptl.dev/v1alpha1" -> "ctlptl.dev"; core "v1" -> ""
    if not isinstance(api_version, str) or "/" not in api_version:
        return ""
    return api_version.split("/", 1)[0]
