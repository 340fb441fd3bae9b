from __future__ import annotations

import asyncio
from dataclasses import dataclass


@dataclass(frozen=True)
class Deadline:
    """Absolute expiry on the running loop's clock, shared by every task of one lookup."""

    expires_at: float
    timeout_seconds: float

    @classmethod
    def after(cls, timeout_seconds: float) -> Deadline:
        loop = asyncio.get_running_loop()
        return cls(expires_at=loop.time() + timeout_seconds, timeout_seconds=timeout_seconds)

    def remaining(self) -> float:
        return max(0.0, self.expires_at - asyncio.get_running_loop().time())

    def expired(self) -> bool:
        return self.remaining() <= 0.0

    def scope(self) -> asyncio.Timeout:
        return asyncio.timeout_at(self.expires_at)
