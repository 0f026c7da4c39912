"""Shared type aliases, reserved event names and errors for reactive-fsm."""
from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Callable

State = Hashable

# Static target state or a handler computing the next state (None = stay).
Handler = Any
EventMap = Mapping[str, Handler]
HandlerTable = Mapping[State, EventMap]

Subscriber = Callable[[Any], None]
Unsubscribe = Callable[[], None]

INIT = "_init"
EXIT = "_exit"
ENTER = "_enter"


class FSMError(Exception):
    """Base class for reactive-fsm errors."""


class MachineClosedError(FSMError):
    """Raised when scheduling a debounced event on a closed machine."""

    def __init__(self, event: str) -> None:
        self.event = event
        super().__init__(f"Cannot debounce {event!r}: machine is closed")
