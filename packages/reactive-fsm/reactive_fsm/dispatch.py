"""Event lookup on the current state's handler table."""
from __future__ import annotations

from typing import Any

from reactive_fsm.types import HandlerTable, State


def dispatch(states: HandlerTable, state: State, event: str, *args: Any, **kwargs: Any) -> Any:
    """Return the outcome of ``event`` for ``state``.

    Looks up ``states[state][event]``. Callables are called with the given
    arguments and their result returned; any other value is returned as a
    static target. A missing state or event yields ``None``.
    """
    handlers = states.get(state)
    if handlers is None:
        return None
    value = handlers.get(event)
    if callable(value):
        return value(*args, **kwargs)
    return value
