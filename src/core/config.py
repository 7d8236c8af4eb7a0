"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Solo entorno: la herramienta no lee ficheros de configuración.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ArgumentError

ENV_PREFIX = "TEXTECHO_"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars).
    - Un único contrato de configuración para la CLI y el logging.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel del logger de diagnóstico (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        name = value.strip().upper()
        if name not in _LEVEL_NAMES:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(_LEVEL_NAMES)}")
        return name


def load_settings() -> AppSettings:
    """Lee `AppSettings` del entorno traduciendo errores a `ArgumentError`."""

    try:
        return AppSettings()
    except ValidationError as exc:
        detail = exc.errors()[0].get("msg", str(exc))
        raise ArgumentError(f"{ENV_PREFIX}LOG_LEVEL: {detail}") from exc
