import asyncio

from lobbyview.services.auto_refresh import AutoRefresher


async def _wait_for(predicate, timeout=1.0):
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not reached in time")
        await asyncio.sleep(0.005)


def test_enabling_twice_keeps_a_single_timer():
    async def scenario():
        handles = []

        def spawn(coro_fn, *args):
            handle = asyncio.get_running_loop().create_task(coro_fn(*args))
            handles.append(handle)
            return handle

        async def tick():
            pass

        refresher = AutoRefresher(tick, interval_ms=1000, spawn=spawn)
        refresher.start()
        refresher.start()
        await asyncio.sleep(0)

        alive = [h for h in handles if not h.done()]
        assert len(handles) == 2
        assert alive == [handles[1]]
        assert refresher.running
        refresher.stop()
        await asyncio.sleep(0)
        assert not refresher.running

    asyncio.run(scenario())


def test_stop_prevents_further_ticks():
    async def scenario():
        calls = []

        async def tick():
            calls.append(1)

        refresher = AutoRefresher(tick, interval_ms=5)
        refresher.set_enabled(True)
        await _wait_for(lambda: len(calls) >= 1)
        refresher.set_enabled(False)
        seen = len(calls)
        await asyncio.sleep(0.05)
        assert len(calls) == seen

    asyncio.run(scenario())


def test_failing_tick_does_not_stop_the_timer():
    async def scenario():
        calls = []

        async def tick():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("boom")

        refresher = AutoRefresher(tick, interval_ms=5)
        refresher.start()
        await _wait_for(lambda: len(calls) >= 2)
        refresher.stop()

    asyncio.run(scenario())


def test_stop_without_start_is_harmless():
    refresher = AutoRefresher(lambda: None, interval_ms=5)
    refresher.stop()
    assert not refresher.running
