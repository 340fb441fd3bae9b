from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator


@dataclass(frozen=True)
class NormalizedAddress:
    postal_code: str
    street: str
    district: str
    city: str
    state: str
    source_name: str


class _ProviderPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        if value is None:
            return ""
        return value


class BrasilApiPayload(_ProviderPayload):
    cep: str = ""
    state: str = ""
    city: str = ""
    district: str = ""
    street: str = ""
    service: str = ""

    def to_address(self, source_name: str) -> NormalizedAddress:
        return NormalizedAddress(
            postal_code=self.cep,
            street=self.street,
            district=self.district,
            city=self.city,
            state=self.state,
            source_name=source_name,
        )


class ViaCepPayload(_ProviderPayload):
    cep: str = ""
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""
    ibge: str = ""
    gia: str = ""
    ddd: str = ""
    siafi: str = ""

    def to_address(self, source_name: str) -> NormalizedAddress:
        return NormalizedAddress(
            postal_code=self.cep,
            street=self.logradouro,
            district=self.bairro,
            city=self.localidade,
            state=self.uf,
            source_name=source_name,
        )
