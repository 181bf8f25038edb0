"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI captura `KubedeskError` y lo presenta en una línea, sin tracebacks.
- Cada error lleva el contexto necesario (endpoint, operación) para que el
  mensaje sea accionable sin reintentar nada.
"""

from __future__ import annotations


class KubedeskError(Exception):
    """Base de todos los errores que la CLI presenta al usuario."""


class UnsupportedFeature(KubedeskError):
    """The backend cannot do what was asked (e.g. attach a registry)."""


class WrongEnvironment(KubedeskError):
    """The configured Docker endpoint is not the local Docker Desktop."""

    def __init__(self, message: str, *, docker_host: str | None, operation: str) -> None:
        super().__init__(message)
        self.docker_host = docker_host
        self.operation = operation


class TransportError(KubedeskError):
    """The Docker Desktop backend was unreachable or rejected a call."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        endpoint: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.endpoint = endpoint
        self.status_code = status_code


class DeadlineExceeded(TransportError):
    """A backend call ran past its deadline."""


class SettingsError(KubedeskError):
    """The settings snapshot cannot be mutated as requested."""


class UnknownSettingError(SettingsError):
    pass


class SettingsFormatError(SettingsError):
    pass


class SettingLockedError(SettingsError):
    pass


class MissingKind(KubedeskError):
    """The name printer could not resolve a kind for the object."""
