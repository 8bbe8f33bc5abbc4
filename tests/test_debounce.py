import asyncio

from shortlink_client.dashboard.debounce import Debouncer


class TestDebouncer:
    def test_rapid_triggers_fire_once_with_last_value(self):
        calls = []

        async def scenario():
            debouncer = Debouncer(0.05, calls.append)
            for value in ("p", "py", "pyt"):
                debouncer.trigger(value)
                await asyncio.sleep(0.01)
            await asyncio.sleep(0.15)

        asyncio.run(scenario())

        assert calls == ["pyt"]

    def test_separate_bursts_fire_separately(self):
        calls = []

        async def scenario():
            debouncer = Debouncer(0.02, calls.append)
            debouncer.trigger("a")
            await asyncio.sleep(0.1)
            debouncer.trigger("b")
            await asyncio.sleep(0.1)

        asyncio.run(scenario())

        assert calls == ["a", "b"]

    def test_cancel_drops_pending_call(self):
        calls = []

        async def scenario():
            debouncer = Debouncer(0.02, calls.append)
            debouncer.trigger("a")
            debouncer.cancel()
            await asyncio.sleep(0.1)
            return debouncer.pending

        assert asyncio.run(scenario()) is False
        assert calls == []

    def test_flush_fires_immediately(self):
        calls = []

        async def scenario():
            debouncer = Debouncer(10, calls.append)
            debouncer.trigger("now")
            debouncer.flush()
            debouncer.flush()
            return debouncer.pending

        assert asyncio.run(scenario()) is False
        assert calls == ["now"]
