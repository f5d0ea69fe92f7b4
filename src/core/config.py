"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los valores por defecto reproducen exactamente las plantillas del mod;
  sobreescribirlos es opcional (`NUZZLIFY_*` o `.env`).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import DEFAULT_INTERVAL_HOURS


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "nuzzlify"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "nuzzlify"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "nuzzlify"
    return Path.home() / ".config" / "nuzzlify"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="NUZZLIFY_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    mods_dir: Path | None = Field(
        default=None,
        description="Carpeta Mods/ explícita; si falta se detecta por plataforma.",
    )
    author: str = Field(
        default="YourName",
        min_length=1,
        description="Valor de <author> en About.xml.",
    )
    package_id_prefix: str = Field(
        default="com.yourname",
        min_length=1,
        description="Prefijo reverse-DNS de <packageId>.",
    )
    description: str = Field(
        default="Auto-generated mod that adds nuzzling behavior to animals.",
        description="Valor de <description> en About.xml.",
    )
    supported_versions: list[str] = Field(
        default_factory=lambda: ["1.5"],
        min_length=1,
        description="Versiones de RimWorld declaradas en <supportedVersions>.",
    )
    default_interval_hours: int = Field(
        default=DEFAULT_INTERVAL_HOURS,
        gt=0,
        description="nuzzleMtbHours para entradas sin ':Hours'.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging cuando no se pasa --verbose.",
    )
