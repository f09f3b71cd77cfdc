"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/fetchers) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.variant import FetchVariant

DEFAULT_BASE_URL = "https://swapi.dev/api"
# Luke Skywalker.
DEFAULT_PERSON_ID = 1


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "swapi-merge"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "swapi-merge"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "swapi-merge"
    return Path.home() / ".config" / "swapi-merge"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SWAPI_MERGE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL de la API (sin barra final).",
    )
    person_id: int = Field(
        default=DEFAULT_PERSON_ID,
        ge=1,
        description="Identificador del sujeto a consultar por defecto.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="swapi-merge/0.1",
        min_length=1,
        description="User-Agent para las peticiones HTTP.",
    )
    default_variant: FetchVariant = Field(
        default=FetchVariant.ASYNC,
        description="Implementación usada cuando la CLI no indica --variant.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel del logger raíz (DEBUG, INFO, WARNING, ERROR).",
    )

    def api_root(self) -> str:
        """Base URL normalizada (sin barra final)."""

        return self.base_url.rstrip("/")
