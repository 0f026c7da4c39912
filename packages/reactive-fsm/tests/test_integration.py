"""Integration tests for reactive-fsm."""
import asyncio

import pytest

from reactive_fsm import fsm, machine_of


class TestFSMIntegration:
    """End-to-end scenarios through the attribute-style API."""

    def test_idle_running_scenario(self):
        """Subscriber sees 'idle' on subscribe and 'running' after start()."""
        switch = fsm("idle", {
            "idle": {"start": lambda: "running"},
            "running": {"stop": lambda: "idle"},
        })
        received = []

        switch.subscribe(received.append)
        assert received == ["idle"]

        switch.start()
        assert received == ["idle", "running"]

        # No 'start' handler while running
        switch.start()
        assert received == ["idle", "running"]
        assert machine_of(switch).state == "running"

    def test_traffic_light_cycle(self):
        """Static targets plus hooks across a full cycle."""
        log = []
        light = fsm("green", {
            "green": {"timer": "yellow", "_exit": lambda: log.append("green off")},
            "yellow": {"timer": "red"},
            "red": {"timer": "green", "_enter": lambda: log.append("stop cars")},
        })
        states = []
        light.subscribe(states.append)

        for _ in range(4):
            light.timer()

        assert states == ["green", "yellow", "red", "green", "yellow"]
        assert log == ["green off", "stop cars", "green off"]

    def test_handler_uses_closure_state(self):
        """Handlers keep their own context; the engine only sees returned states."""
        context = {"retries": 0}

        def fail():
            context["retries"] += 1
            return "broken" if context["retries"] >= 3 else None

        service = fsm("ok", {"ok": {"fail": fail}, "broken": {"reset": "ok"}})

        assert service.fail() == "ok"
        assert service.fail() == "ok"
        assert service.fail() == "broken"
        assert service.reset() == "ok"

    def test_terminal_state(self):
        """A state with no outgoing events never leaves."""
        job = fsm("queued", {"queued": {"run": "done"}, "done": {}})
        job.run()
        assert job.run() == "done"
        assert job.retry() == "done"

    @pytest.mark.asyncio
    async def test_search_box_debounce(self):
        """Typing quickly only searches for the last query."""
        searches = []

        def search(query):
            searches.append(query)
            return "results"

        box = fsm("typing", {
            "typing": {"search": search},
            "results": {"search": search},
        })
        states = []
        box.subscribe(states.append)

        for query in ["r", "re", "rea", "reac"]:
            box.search.debounce(20, query)
            await asyncio.sleep(0.002)

        await asyncio.sleep(0.06)

        assert searches == ["reac"]
        assert states == ["typing", "results"]
        machine_of(box).close()
