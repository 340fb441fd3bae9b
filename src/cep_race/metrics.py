from __future__ import annotations

from collections import defaultdict


class InMemoryLookupMetricsCollector:
    def __init__(self) -> None:
        self.provider_requests_total: dict[str, int] = defaultdict(int)
        self.provider_failures_total: dict[tuple[str, str], int] = defaultdict(int)
        self.race_wins_total: dict[str, int] = defaultdict(int)
        self.race_timeouts_total = 0
        self.race_durations_ms: list[float] = []

    def increment_provider_request(self, provider: str) -> None:
        self.provider_requests_total[provider] += 1

    def increment_provider_failure(self, provider: str, reason: str) -> None:
        self.provider_failures_total[(provider, reason)] += 1

    def increment_race_win(self, provider: str) -> None:
        self.race_wins_total[provider] += 1

    def increment_race_timeout(self) -> None:
        self.race_timeouts_total += 1

    def observe_race_duration(self, duration_ms: float) -> None:
        self.race_durations_ms.append(duration_ms)
