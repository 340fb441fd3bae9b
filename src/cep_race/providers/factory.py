from __future__ import annotations

from collections.abc import Callable

import httpx

from cep_race.config import LookupSettings
from cep_race.metrics import InMemoryLookupMetricsCollector
from cep_race.providers.base import BaseCepProvider
from cep_race.providers.brasilapi import BrasilApiProvider
from cep_race.providers.viacep import ViaCepProvider

ProviderType = type[BaseCepProvider]

_PROVIDERS: dict[str, ProviderType] = {
    "brasilapi": BrasilApiProvider,
    "viacep": ViaCepProvider,
}


def supported_providers() -> list[str]:
    return sorted(_PROVIDERS.keys())


def build_provider(
    key: str,
    base_url: str,
    timeout_seconds: float,
    metrics: InMemoryLookupMetricsCollector | None = None,
    client_factory: Callable[[], httpx.AsyncClient] | None = None,
) -> BaseCepProvider:
    provider_type = _PROVIDERS.get(key)
    if provider_type is None:
        supported = ", ".join(supported_providers())
        raise ValueError(f"unsupported provider '{key}', supported: {supported}")
    return provider_type(
        base_url=base_url,
        timeout_seconds=timeout_seconds,
        metrics=metrics,
        client_factory=client_factory,
    )


def build_providers(
    settings: LookupSettings,
    metrics: InMemoryLookupMetricsCollector | None = None,
    client_factory: Callable[[], httpx.AsyncClient] | None = None,
) -> list[BaseCepProvider]:
    base_urls = {
        "brasilapi": settings.BRASILAPI_BASE_URL,
        "viacep": settings.VIACEP_BASE_URL,
    }
    return [
        build_provider(
            key,
            base_url=base_urls[key],
            timeout_seconds=settings.TIMEOUT_SECONDS,
            metrics=metrics,
            client_factory=client_factory,
        )
        for key in settings.provider_keys()
    ]
