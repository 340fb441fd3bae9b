from __future__ import annotations

import pytest
from pydantic import ValidationError

from cep_race.config import LookupSettings, load_settings
from cep_race.providers.brasilapi import BrasilApiProvider
from cep_race.providers.viacep import ViaCepProvider


def test_load_settings_defaults(monkeypatch) -> None:
    for name in ("TIMEOUT_SECONDS", "BRASILAPI_BASE_URL", "VIACEP_BASE_URL", "PROVIDERS", "LOG_LEVEL"):
        monkeypatch.delenv(f"CEP_RACE_{name}", raising=False)
    settings = load_settings()

    assert settings.TIMEOUT_SECONDS == 1.0
    assert settings.BRASILAPI_BASE_URL == "https://brasilapi.com.br/api/cep/v1"
    assert settings.VIACEP_BASE_URL == "http://viacep.com.br/ws"
    assert settings.provider_keys() == ["brasilapi", "viacep"]
    assert settings.LOG_LEVEL == "WARNING"


def test_load_settings_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("CEP_RACE_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("CEP_RACE_PROVIDERS", " ViaCEP , viacep ")
    monkeypatch.setenv("CEP_RACE_LOG_LEVEL", "debug")
    settings = load_settings()

    assert settings.TIMEOUT_SECONDS == 2.5
    assert settings.provider_keys() == ["viacep"]
    assert settings.LOG_LEVEL == "DEBUG"


def test_settings_reject_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        LookupSettings(TIMEOUT_SECONDS=0)


def test_settings_reject_unknown_provider() -> None:
    with pytest.raises(ValidationError):
        LookupSettings(PROVIDERS="brasilapi,postmon")


def test_settings_reject_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        LookupSettings(LOG_LEVEL="verbose")


def test_provider_defaults_follow_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("CEP_RACE_BRASILAPI_BASE_URL", raising=False)
    monkeypatch.delenv("CEP_RACE_VIACEP_BASE_URL", raising=False)
    settings = LookupSettings()

    assert BrasilApiProvider().build_url("01153000") == f"{settings.BRASILAPI_BASE_URL}/01153000"
    assert ViaCepProvider().build_url("01153000") == f"{settings.VIACEP_BASE_URL}/01153000/json/"
