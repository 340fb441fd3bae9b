"""CEP provider adapters."""

from cep_race.providers.base import BaseCepProvider
from cep_race.providers.brasilapi import BrasilApiProvider
from cep_race.providers.factory import build_provider, build_providers, supported_providers
from cep_race.providers.viacep import ViaCepProvider

__all__ = [
    "BaseCepProvider",
    "BrasilApiProvider",
    "ViaCepProvider",
    "build_provider",
    "build_providers",
    "supported_providers",
]
