"""AdmissionGate 單元測試"""

import asyncio

import pytest

from libs.ranking.src.domain.services.admission_gate import AdmissionGate


class TestAdmissionGate:
    """測試並發閘門"""

    def test_rejects_non_positive_capacity(self) -> None:
        with pytest.raises(ValueError):
            AdmissionGate(0)

    @pytest.mark.asyncio
    async def test_never_exceeds_capacity(self) -> None:
        gate = AdmissionGate(2)
        observed: list[int] = []

        async def work() -> None:
            async with gate:
                observed.append(gate.in_flight)
                await asyncio.sleep(0.01)

        await asyncio.gather(*(work() for _ in range(7)))

        assert max(observed) <= 2
        assert gate.peak_in_flight == 2
        assert gate.in_flight == 0

    @pytest.mark.asyncio
    async def test_slot_released_when_body_raises(self) -> None:
        gate = AdmissionGate(1)

        with pytest.raises(RuntimeError):
            async with gate:
                raise RuntimeError("boom")

        assert gate.in_flight == 0
        # Slot is free again
        await asyncio.wait_for(gate.__aenter__(), timeout=0.5)
        await gate.__aexit__(None, None, None)

    @pytest.mark.asyncio
    async def test_slot_released_on_cancellation(self) -> None:
        gate = AdmissionGate(1)
        entered = asyncio.Event()

        async def hold() -> None:
            async with gate:
                entered.set()
                await asyncio.sleep(10)

        task = asyncio.create_task(hold())
        await entered.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert gate.in_flight == 0
        assert gate.capacity == 1
