from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

import httpx

from cep_race.deadline import Deadline
from cep_race.exceptions import (
    ProviderHTTPStatusError,
    ProviderNormalizationError,
    ProviderRequestError,
    ProviderTimeoutError,
)
from cep_race.metrics import InMemoryLookupMetricsCollector
from cep_race.models import NormalizedAddress

logger = logging.getLogger(__name__)


class BaseCepProvider(ABC):
    provider_name: str

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        metrics: InMemoryLookupMetricsCollector | None = None,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._metrics = metrics
        self._client_factory = client_factory

    @abstractmethod
    def build_url(self, cep: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def parse_payload(self, payload: Any) -> NormalizedAddress:
        raise NotImplementedError

    async def fetch_address(self, cep: str) -> NormalizedAddress:
        url = self.build_url(cep)
        try:
            factory = self._client_factory or (lambda: httpx.AsyncClient(timeout=self._timeout_seconds))
            async with factory() as client:
                response = await client.get(url)
        except httpx.TimeoutException as exc:
            raise ProviderTimeoutError(f"provider timeout: provider={self.provider_name}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ProviderRequestError(f"provider request error: provider={self.provider_name}") from exc

        if not response.is_success:
            raise ProviderHTTPStatusError(
                f"provider request rejected: provider={self.provider_name}, status={response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderNormalizationError(f"provider payload is not valid json: provider={self.provider_name}") from exc
        return self.parse_payload(payload)

    async def lookup(
        self,
        cep: str,
        deadline: Deadline,
        results: asyncio.Queue[NormalizedAddress],
    ) -> None:
        """Publish this provider's address onto ``results`` at most once.

        Every provider-side failure, the deadline included, is logged and
        counted here and never raised, so the coordinator only ever sees
        winners on the queue.
        """
        if deadline.expired():
            self._record_failure(cep, reason="deadline_exceeded")
            return

        if self._metrics:
            self._metrics.increment_provider_request(self.provider_name)
        logger.debug("provider_lookup_started", extra={"provider": self.provider_name, "cep": cep})
        started = time.perf_counter()
        try:
            async with deadline.scope():
                address = await self.fetch_address(cep)
        except TimeoutError:
            self._record_failure(cep, reason="deadline_exceeded")
            return
        except ProviderTimeoutError:
            self._record_failure(cep, reason="timeout")
            return
        except ProviderHTTPStatusError as exc:
            self._record_failure(cep, reason="http_status", status_code=exc.status_code)
            return
        except ProviderRequestError:
            self._record_failure(cep, reason="request_error")
            return
        except ProviderNormalizationError:
            self._record_failure(cep, reason="invalid_payload")
            return

        logger.debug(
            "provider_lookup_succeeded",
            extra={
                "provider": self.provider_name,
                "cep": cep,
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        # The queue holds one slot per provider, so this never blocks a loser.
        results.put_nowait(address)

    def _record_failure(self, cep: str, reason: str, status_code: int | None = None) -> None:
        if self._metrics:
            self._metrics.increment_provider_failure(self.provider_name, reason)
        extra: dict[str, Any] = {"provider": self.provider_name, "cep": cep, "reason": reason}
        if status_code is not None:
            extra["status_code"] = status_code
        level = logging.INFO if reason == "deadline_exceeded" else logging.WARNING
        logger.log(level, "provider_lookup_failed", extra=extra)
