from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROVIDER_KEYS = ("brasilapi", "viacep")
BRASILAPI_DEFAULT_BASE_URL = "https://brasilapi.com.br/api/cep/v1"
VIACEP_DEFAULT_BASE_URL = "http://viacep.com.br/ws"


class LookupSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CEP_RACE_", extra="ignore")

    TIMEOUT_SECONDS: float = 1.0
    BRASILAPI_BASE_URL: str = BRASILAPI_DEFAULT_BASE_URL
    VIACEP_BASE_URL: str = VIACEP_DEFAULT_BASE_URL
    PROVIDERS: str = ",".join(PROVIDER_KEYS)
    LOG_LEVEL: str = "WARNING"

    @field_validator("TIMEOUT_SECONDS")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("TIMEOUT_SECONDS must be > 0")
        return value

    @field_validator("PROVIDERS")
    @classmethod
    def _known_providers(cls, value: str) -> str:
        keys = list(dict.fromkeys(key.strip().lower() for key in value.split(",") if key.strip()))
        if not keys:
            raise ValueError("PROVIDERS must name at least one provider")
        unknown = [key for key in keys if key not in PROVIDER_KEYS]
        if unknown:
            raise ValueError(f"unsupported providers {unknown}, supported: {', '.join(PROVIDER_KEYS)}")
        return ",".join(keys)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unsupported LOG_LEVEL '{value}'")
        return level

    def provider_keys(self) -> list[str]:
        return self.PROVIDERS.split(",")


def load_settings() -> LookupSettings:
    return LookupSettings()
