"""Admission Gate

Counting gate that bounds how many fetches run at once.
Wraps asyncio.Semaphore and keeps in-flight counters so the bound can be
inspected and tested. All counters are only touched on the event loop thread.
"""

import asyncio


class AdmissionGate:
    """Async context manager: `async with gate:` holds one slot"""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._semaphore = asyncio.Semaphore(capacity)
        self._in_flight = 0
        self._peak_in_flight = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def peak_in_flight(self) -> int:
        """Highest in_flight value observed since construction"""
        return self._peak_in_flight

    async def __aenter__(self) -> "AdmissionGate":
        await self._semaphore.acquire()
        self._in_flight += 1
        self._peak_in_flight = max(self._peak_in_flight, self._in_flight)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._in_flight -= 1
        self._semaphore.release()
