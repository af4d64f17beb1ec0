"""Latency providers standing in for the inference round trip."""

import asyncio
from dataclasses import dataclass, field
from typing import Protocol

TEXT = "text"
IMAGE = "image"
SMART = "smart"
SEARCH = "search"


class LatencyProvider(Protocol):
    """Interface for awaiting the latency of a suggestion operation."""

    async def wait(self, operation: str) -> None:
        """Suspend for as long as the given operation takes."""


@dataclass
class NoLatency(LatencyProvider):
    """Latency provider that returns immediately."""

    async def wait(self, operation: str) -> None:
        """Return without suspending."""
        return None


@dataclass
class SimulatedLatency(LatencyProvider):
    """Sleeps a fixed delay per operation to mimic a remote model call."""

    delays: dict[str, float] = field(default_factory=dict)

    async def wait(self, operation: str) -> None:
        """Sleep for the configured delay of the operation, if any."""
        delay = self.delays.get(operation, 0.0)
        if delay > 0:
            await asyncio.sleep(delay)
