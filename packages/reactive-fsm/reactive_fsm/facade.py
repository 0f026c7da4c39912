"""Attribute-style event API over a :class:`Machine`.

Every attribute of a :class:`MachineProxy` other than ``subscribe`` is an
event invoker created on first access::

    light = fsm("green", {"green": {"timer": "yellow"}})
    light.subscribe(print)        # prints "green"
    light.timer()                 # prints "yellow"
    light.timer.debounce(250)     # invoke "timer" after 250ms

``subscribe`` registers a listener when called with a single callable and
otherwise invokes the event named ``"subscribe"``.
"""
from __future__ import annotations

import asyncio
from typing import Any

from reactive_fsm.machine import Machine
from reactive_fsm.types import HandlerTable, State

_MACHINE_ATTR = "_MachineProxy__machine"


class EventInvoker:
    """Callable bound to one event name of a machine."""

    __slots__ = ("_machine", "_event")

    def __init__(self, machine: Machine, event: str) -> None:
        self._machine = machine
        self._event = event

    @property
    def event(self) -> str:
        return self._event

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._machine.invoke(self._event, *args, **kwargs)

    def debounce(self, wait: float | None = None, *args: Any, **kwargs: Any) -> asyncio.Future[Any]:
        return self._machine.debounce(self._event, wait, *args, **kwargs)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._event!r}>"


class SubscribeInvoker(EventInvoker):
    """``subscribe``: listener registration or the ``"subscribe"`` event."""

    __slots__ = ()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if len(args) == 1 and not kwargs and callable(args[0]):
            return self._machine.on_change(args[0])
        return self._machine.invoke(self._event, *args, **kwargs)


class MachineProxy:
    """Exposes each event of a machine as an attribute."""

    def __init__(self, machine: Machine) -> None:
        self.__machine = machine
        self.subscribe = SubscribeInvoker(machine, "subscribe")

    def __getattr__(self, name: str) -> EventInvoker:
        # Only reached for names not yet cached in the instance dict.
        if name == _MACHINE_ATTR or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        invoker = EventInvoker(self.__machine, name)
        setattr(self, name, invoker)
        return invoker

    def __repr__(self) -> str:
        return f"<MachineProxy state={self.__machine.state!r}>"


def machine_of(proxy: MachineProxy) -> Machine:
    """Return the machine behind ``proxy``."""
    return object.__getattribute__(proxy, _MACHINE_ATTR)


def fsm(initial: State, states: HandlerTable | None = None, **kwargs: Any) -> MachineProxy:
    """Create a machine and return its attribute-style proxy.

    Keyword arguments (``config``, ``loop``) are passed to :class:`Machine`.
    """
    return MachineProxy(Machine(initial, states, **kwargs))
