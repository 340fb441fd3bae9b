from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence

from cep_race.deadline import Deadline
from cep_race.exceptions import LookupTimeoutError
from cep_race.metrics import InMemoryLookupMetricsCollector
from cep_race.models import NormalizedAddress
from cep_race.providers.base import BaseCepProvider

logger = logging.getLogger(__name__)


class RaceCoordinator:
    """Resolve a CEP with whichever provider answers first.

    All providers start together under one shared deadline and publish onto a
    queue with one slot per provider. The first address read from the queue
    wins. Losing tasks are not cancelled: they either publish into their
    unread slot or stop on their own when the deadline expires. When two
    providers finish in the same loop iteration the winner is whichever
    published first, which is not deterministic.
    """

    def __init__(
        self,
        providers: Sequence[BaseCepProvider],
        timeout_seconds: float = 1.0,
        metrics: InMemoryLookupMetricsCollector | None = None,
    ) -> None:
        if not providers:
            raise ValueError("at least one provider is required")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self._providers = list(providers)
        self._timeout_seconds = timeout_seconds
        self._metrics = metrics
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    @property
    def pending_tasks(self) -> set[asyncio.Task[None]]:
        return {task for task in self._tasks if not task.done()}

    async def resolve(self, cep: str) -> NormalizedAddress:
        deadline = Deadline.after(self._timeout_seconds)
        results: asyncio.Queue[NormalizedAddress] = asyncio.Queue(maxsize=len(self._providers))
        started = time.perf_counter()

        for provider in self._providers:
            task = asyncio.create_task(
                provider.lookup(cep, deadline, results),
                name=f"cep-lookup-{provider.provider_name}",
            )
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

        try:
            async with deadline.scope():
                address = await results.get()
        except TimeoutError as exc:
            if self._metrics:
                self._metrics.increment_race_timeout()
            logger.warning(
                "race_timed_out",
                extra={"cep": cep, "timeout_seconds": self._timeout_seconds},
            )
            raise LookupTimeoutError(self._timeout_seconds) from exc

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        if self._metrics:
            self._metrics.increment_race_win(address.source_name)
            self._metrics.observe_race_duration(elapsed_ms)
        logger.info(
            "race_won",
            extra={"cep": cep, "provider": address.source_name, "elapsed_ms": elapsed_ms},
        )
        return address

    async def wait_closed(self) -> None:
        pending = list(self._tasks)
        if pending:
            await asyncio.gather(*pending)
