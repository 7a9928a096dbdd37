from __future__ import annotations

import json
from typing import Annotated, List, Any, Literal
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import Field, AliasChoices, field_validator


class Settings(BaseSettings):
    # Звідки читати .env і що робити з зайвими ключами
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",  # суворо: невідомі ключі заборонені (допомагає ловити орфографію)
    )

    # Загальні налаштування
    APP_NAME: str = "QCM Server"
    API_PREFIX: str = "/api"
    APP_ENV: str = Field(
        "dev",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Application environment: dev|staging|prod",
    )
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
        description="Logging level name",
    )

    # Порти/хости
    HOST: str = Field(
        "0.0.0.0",
        validation_alias=AliasChoices("HOST", "host"),
        description="Interface to bind",
    )
    PORT: int = Field(
        8080,
        validation_alias=AliasChoices("PORT", "port"),
        description="Port to bind",
    )

    # Дані та статика
    QCM_FILE: str = Field(
        "qcm.json",
        validation_alias=AliasChoices("QCM_FILE", "qcm_file"),
        description="Path to the question bank JSON file",
    )
    STATIC_DIR: str = Field(
        ".",
        validation_alias=AliasChoices("STATIC_DIR", "static_dir"),
        description="Directory with index.html, style.css and script.js",
    )

    # CORS origins
    FRONTEND_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices("FRONTEND_ORIGINS", "frontend_origins"),
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("FRONTEND_ORIGINS", mode="before")
    @classmethod
    def _parse_origins(cls, v: Any) -> Any:
        """
        Дозволяє задавати FRONTEND_ORIGINS у .env як:
        - JSON-масив: ["http://localhost:5173","http://localhost:3000"]
        - або як рядок: http://localhost:5173,http://localhost:3000
        - або з ; як роздільником
        """
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("[") and s.endswith("]"):
                try:
                    return json.loads(s)
                except ValueError:
                    # якщо JSON кривий — fallback на split
                    pass
            return [item.strip() for item in s.replace(";", ",").split(",") if item.strip()]
        return v


settings = Settings()
