from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from cep_race.config import VIACEP_DEFAULT_BASE_URL
from cep_race.exceptions import ProviderNormalizationError
from cep_race.models import NormalizedAddress, ViaCepPayload
from cep_race.providers.base import BaseCepProvider

DEFAULT_BASE_URL = VIACEP_DEFAULT_BASE_URL


class ViaCepProvider(BaseCepProvider):
    provider_name = "ViaCEP"

    def __init__(self, base_url: str = DEFAULT_BASE_URL, **kwargs: Any) -> None:
        super().__init__(base_url=base_url, **kwargs)

    def build_url(self, cep: str) -> str:
        return f"{self._base_url}/{cep}/json/"

    def parse_payload(self, payload: Any) -> NormalizedAddress:
        if not isinstance(payload, dict):
            raise ProviderNormalizationError("viacep payload is not a json object")
        # ViaCEP answers unknown CEPs with 200 and {"erro": true}.
        if payload.get("erro") not in (None, False, "false"):
            raise ProviderNormalizationError("viacep reported cep not found")
        try:
            data = ViaCepPayload.model_validate(payload)
        except ValidationError as exc:
            raise ProviderNormalizationError("viacep payload does not match schema") from exc
        return data.to_address(self.provider_name)
