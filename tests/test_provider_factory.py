from __future__ import annotations

import pytest

from cep_race.config import PROVIDER_KEYS, LookupSettings
from cep_race.providers.brasilapi import BrasilApiProvider
from cep_race.providers.factory import build_provider, build_providers, supported_providers
from cep_race.providers.viacep import ViaCepProvider


def test_supported_providers_match_settings_keys() -> None:
    assert supported_providers() == sorted(PROVIDER_KEYS)


def test_build_provider_returns_matching_adapter() -> None:
    provider = build_provider("viacep", base_url="http://viacep.example.com/ws/", timeout_seconds=1.0)

    assert isinstance(provider, ViaCepProvider)
    assert provider.build_url("01153000") == "http://viacep.example.com/ws/01153000/json/"


def test_build_provider_raises_for_unsupported_provider() -> None:
    with pytest.raises(ValueError):
        build_provider("postmon", base_url="https://api.postmon.com.br/v1/cep", timeout_seconds=1.0)


def test_build_providers_follows_settings_order() -> None:
    settings = LookupSettings(
        PROVIDERS="viacep,brasilapi",
        BRASILAPI_BASE_URL="https://brasilapi.example.com/api/cep/v1",
    )

    providers = build_providers(settings)

    assert [type(provider) for provider in providers] == [ViaCepProvider, BrasilApiProvider]
    assert providers[1].build_url("01153000") == "https://brasilapi.example.com/api/cep/v1/01153000"
