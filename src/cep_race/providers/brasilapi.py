from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from cep_race.config import BRASILAPI_DEFAULT_BASE_URL
from cep_race.exceptions import ProviderNormalizationError
from cep_race.models import BrasilApiPayload, NormalizedAddress
from cep_race.providers.base import BaseCepProvider

DEFAULT_BASE_URL = BRASILAPI_DEFAULT_BASE_URL


class BrasilApiProvider(BaseCepProvider):
    provider_name = "BrasilAPI"

    def __init__(self, base_url: str = DEFAULT_BASE_URL, **kwargs: Any) -> None:
        super().__init__(base_url=base_url, **kwargs)

    def build_url(self, cep: str) -> str:
        return f"{self._base_url}/{cep}"

    def parse_payload(self, payload: Any) -> NormalizedAddress:
        if not isinstance(payload, dict):
            raise ProviderNormalizationError("brasilapi payload is not a json object")
        try:
            data = BrasilApiPayload.model_validate(payload)
        except ValidationError as exc:
            raise ProviderNormalizationError("brasilapi payload does not match schema") from exc
        return data.to_address(self.provider_name)
