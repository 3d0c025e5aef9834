"""Tests for formkeeper.observable — callbacks and async change streams."""

import contextlib

import anyio
import pytest

from formkeeper.observable import Observable


class TestSyncSubscribers:
    def test_value(self) -> None:
        assert Observable(3).value == 3

    def test_callback_receives_new_value(self) -> None:
        obs = Observable(0)
        seen: list[int] = []
        obs.subscribe(seen.append)

        obs.set(1)
        obs.set(2)

        assert seen == [1, 2]

    def test_equal_value_is_noop(self) -> None:
        obs = Observable(("a",))
        seen: list[tuple[str, ...]] = []
        obs.subscribe(seen.append)

        obs.set(("a",))

        assert seen == []

    def test_unsubscribe(self) -> None:
        obs = Observable(0)
        seen: list[int] = []
        unsubscribe = obs.subscribe(seen.append)

        unsubscribe()
        unsubscribe()
        obs.set(1)

        assert seen == []
        assert obs.subscriber_count == 0

    def test_callback_error_propagates(self) -> None:
        obs = Observable(0)

        def boom(value: int) -> None:
            raise RuntimeError("boom")

        obs.subscribe(boom)
        with pytest.raises(RuntimeError, match="boom"):
            obs.set(1)
        assert obs.value == 1


async def _wait_for_subscribers(obs: Observable[int], count: int) -> None:
    with anyio.fail_after(1):
        while obs.subscriber_count < count:
            await anyio.sleep(0)


@pytest.mark.anyio
async def test_changes_yields_values_until_close() -> None:
    obs = Observable(0)
    received: list[int] = []

    async def consume() -> None:
        async for value in obs.changes():
            received.append(value)

    async with anyio.create_task_group() as tg:
        tg.start_soon(consume)
        await _wait_for_subscribers(obs, 1)
        obs.set(1)
        obs.set(2)
        obs.close()

    assert received == [1, 2]
    assert obs.subscriber_count == 0


@pytest.mark.anyio
async def test_changes_drops_values_for_slow_consumer() -> None:
    obs = Observable(0, buffer_size=1)
    received: list[int] = []

    async def consume() -> None:
        async for value in obs.changes():
            received.append(value)

    async with anyio.create_task_group() as tg:
        tg.start_soon(consume)
        await _wait_for_subscribers(obs, 1)
        obs.set(1)
        obs.set(2)
        obs.set(3)
        obs.close()

    assert received[0] == 1
    assert obs.value == 3


@pytest.mark.anyio
async def test_changes_cleans_up_on_exit() -> None:
    obs = Observable(0)

    async def first_only() -> None:
        async with contextlib.aclosing(obs.changes()) as changes:
            async for _ in changes:
                break

    async with anyio.create_task_group() as tg:
        tg.start_soon(first_only)
        await _wait_for_subscribers(obs, 1)
        obs.set(1)

    assert obs.subscriber_count == 0
