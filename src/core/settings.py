"""Mutación pura del snapshot de settings de Docker Desktop.

El snapshot es el documento JSON completo que devuelve el backend. Aquí solo
se cambia en memoria: leer y escribir son responsabilidad del cliente.
"""

from __future__ import annotations

import copy
from typing import Any

from core.domain.errors import SettingLockedError, SettingsFormatError, UnknownSettingError

Snapshot = dict[str, Any]

KUBERNETES_ENABLED = "kubernetesEnabled"

# Named flags -> dotted path inside the settings document.
FLAG_PATHS: dict[str, str] = {
    KUBERNETES_ENABLED: "vm.kubernetes.enabled",
}


def set_flag(snapshot: Snapshot, flag_name: str, value: bool) -> tuple[Snapshot, bool]:
    """Set a boolean flag, returning `(new_snapshot, changed)`.

    The input snapshot is left untouched. `changed` is False when the flag
    already held `value`; callers must then skip the write.
    """

    path = FLAG_PATHS.get(flag_name)
    if path is None:
        raise UnknownSettingError(f"unknown setting {flag_name!r} (known: {', '.join(sorted(FLAG_PATHS))})")

    updated = copy.deepcopy(snapshot)
    parent, leaf_key = _lookup_parent(updated, path)
    leaf = parent[leaf_key]

    if isinstance(leaf, dict):
        current = leaf.get("value")
        if not isinstance(current, bool):
            raise SettingsFormatError(f"setting {path}.value is not a boolean: {current!r}")
        if current == value:
            return updated, False
        if leaf.get("locked") is True:
            raise SettingLockedError(f"setting {path} is locked by an administrator")
        leaf["value"] = value
        return updated, True

    if not isinstance(leaf, bool):
        raise SettingsFormatError(f"setting {path} is not a boolean: {leaf!r}")
    if leaf == value:
        return updated, False
    parent[leaf_key] = value
    return updated, True


def get_flag(snapshot: Snapshot, flag_name: str) -> bool:
    """Read a named flag from the snapshot."""

    path = FLAG_PATHS.get(flag_name)
    if path is None:
        raise UnknownSettingError(f"unknown setting {flag_name!r}")

    parent, leaf_key = _lookup_parent(snapshot, path)
    leaf = parent[leaf_key]
    if isinstance(leaf, dict):
        leaf = leaf.get("value")
    if not isinstance(leaf, bool):
        raise SettingsFormatError(f"setting {path} is not a boolean: {leaf!r}")
    return leaf


def _lookup_parent(snapshot: Snapshot, path: str) -> tuple[dict[str, Any], str]:
    keys = path.split(".")
    node: Any = snapshot
    for index, key in enumerate(keys[:-1]):
        if not isinstance(node, dict) or key not in node:
            missing = ".".join(keys[: index + 1])
            raise SettingsFormatError(f"settings document has no {missing!r} section")
        node = node[key]

    leaf_key = keys[-1]
    if not isinstance(node, dict) or leaf_key not in node:
        raise SettingsFormatError(f"settings document has no {path!r} entry")
    return node, leaf_key
