"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que los clientes de servicio (HTTP/auth) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "watson-sdk"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "watson-sdk"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "watson-sdk"
    return Path.home() / ".config" / "watson-sdk"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# watson-sdk user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class WatsonSettings(BaseSettings):
    """Configuración compartida por todos los clientes de servicio.

    Notas:
    - Cada servicio tiene su propio endpoint (`compare_comply_url`,
      `discovery_url`, ...); si falta se usa el endpoint público por defecto.
    - Las credenciales se resuelven en orden: bearer token, API key (IAM),
      usuario/contraseña. Ver `adapters.authenticators.build_auth`.
    """

    model_config = SettingsConfigDict(
        env_prefix="WATSON_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    compare_comply_url: str | None = Field(default=None, description="Endpoint de Compare and Comply.")
    discovery_url: str | None = Field(default=None, description="Endpoint de Discovery.")
    speech_to_text_url: str | None = Field(default=None, description="Endpoint de Speech to Text.")
    natural_language_understanding_url: str | None = Field(
        default=None,
        description="Endpoint de Natural Language Understanding.",
    )
    version: str | None = Field(
        default=None,
        description="Fecha de versión de la API (yyyy-MM-dd) para servicios versionados.",
    )

    apikey: str | None = Field(
        default=None,
        description="API key de IBM Cloud (autenticación IAM).",
    )
    iam_url: str = Field(
        default="https://iam.cloud.ibm.com/identity/token",
        min_length=8,
        description="Endpoint de intercambio de tokens IAM.",
    )
    bearer_token: str | None = Field(
        default=None,
        description="Access token gestionado por el usuario (tiene prioridad sobre apikey).",
    )
    username: str | None = Field(
        default=None,
        description="Usuario para autenticación básica (instancias antiguas).",
    )
    password: str | None = Field(
        default=None,
        description="Contraseña para autenticación básica.",
    )

    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="watson-sdk-python/0.1",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )
    disable_ssl_verification: bool = Field(
        default=False,
        description="Desactiva la verificación TLS (solo entornos de prueba).",
    )
