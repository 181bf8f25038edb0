"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (socket del backend, HTTP) lean config de forma
  consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "kubedesk"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "kubedesk"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "kubedesk"
    return Path.home() / ".config" / "kubedesk"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="KUBEDESK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    docker_host: str | None = Field(
        default=None,
        validation_alias=AliasChoices("KUBEDESK_DOCKER_HOST", "DOCKER_HOST", "docker_host"),
        description="Endpoint del daemon Docker (DOCKER_HOST). Vacío = daemon local.",
    )
    backend_socket: Path | None = Field(
        default=None,
        description="Socket del backend de Docker Desktop (override del path por SO).",
    )
    backend_url: str | None = Field(
        default=None,
        description="URL HTTP del backend (alternativa al socket, p.ej. en Windows).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request al backend (segundos).",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging por defecto de la CLI.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value
