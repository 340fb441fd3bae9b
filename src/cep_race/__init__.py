"""Resolve Brazilian CEPs by racing independent lookup providers."""

from cep_race.config import LookupSettings, load_settings
from cep_race.deadline import Deadline
from cep_race.exceptions import (
    CepLookupError,
    LookupTimeoutError,
    ProviderHTTPStatusError,
    ProviderNormalizationError,
    ProviderRequestError,
    ProviderTimeoutError,
)
from cep_race.metrics import InMemoryLookupMetricsCollector
from cep_race.models import NormalizedAddress
from cep_race.race import RaceCoordinator

__all__ = [
    "CepLookupError",
    "Deadline",
    "InMemoryLookupMetricsCollector",
    "LookupSettings",
    "LookupTimeoutError",
    "NormalizedAddress",
    "ProviderHTTPStatusError",
    "ProviderNormalizationError",
    "ProviderRequestError",
    "ProviderTimeoutError",
    "RaceCoordinator",
    "load_settings",
]
