"""Machine - event invocation, transitions and debounced events."""
from __future__ import annotations

import asyncio
import logging
from typing import Any

from reactive_fsm.config import MachineConfig
from reactive_fsm.debounce import Debouncer
from reactive_fsm.store import StateStore
from reactive_fsm.types import (
    INIT,
    HandlerTable,
    MachineClosedError,
    State,
    Subscriber,
    Unsubscribe,
)

_logger = logging.getLogger(__name__)


def _same_state(a: State, b: State) -> bool:
    return a is b or (type(a) is type(b) and a == b)


class Machine:
    """Finite state machine whose current state can be subscribed to.

    ``states`` maps each state to its events. An event entry is either a
    static target state or a handler called with the invocation arguments
    that returns the next state, or ``None`` to stay put. The reserved
    entries ``_init``, ``_exit`` and ``_enter`` are called for their side
    effects on construction, before leaving a state and after entering one.

    A returned state equal to the current one, of the same type, is not a
    transition; ``True`` and ``1`` count as different states.

    Handlers may call back into the machine; nested transitions are not
    guarded against.
    """

    def __init__(
        self,
        initial: State,
        states: HandlerTable | None = None,
        *,
        config: MachineConfig | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._config = config if config is not None else MachineConfig()
        self._store = StateStore(initial, states)
        self._debouncer = Debouncer(self.invoke, loop)
        self._closed = False
        # Raw dispatch: a return value here must not cause a transition.
        self._store.dispatch(INIT)

    @property
    def state(self) -> State:
        return self._store.state

    @property
    def config(self) -> MachineConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def on_change(self, callback: Subscriber) -> Unsubscribe:
        """Subscribe to state changes (called immediately with the current state)."""
        return self._store.subscribe(callback)

    def invoke(self, event: str, *args: Any, **kwargs: Any) -> State:
        """Run ``event`` on the current state and return the resulting state."""
        new_state = self._store.dispatch(event, *args, **kwargs)
        # Compared after dispatch: the handler may itself have transitioned.
        current = self._store.state
        if new_state is not None and not _same_state(new_state, current):
            self._store.transition(new_state)
        return self._store.state

    def debounce(
        self, event: str, wait: float | None = None, *args: Any, **kwargs: Any,
    ) -> asyncio.Future[Any]:
        """Invoke ``event`` after ``wait`` milliseconds unless debounced again first.

        Returns a future resolving to the state after the invocation, or to
        ``None`` if a later ``debounce`` of the same event superseded it.
        """
        if self._closed:
            raise MachineClosedError(event)
        if wait is None:
            wait = self._config.debounce_wait_ms
        return self._debouncer.schedule(event, wait, *args, **kwargs)

    def pending(self) -> list[str]:
        """Event names with a debounced invocation still waiting to fire."""
        return self._debouncer.pending()

    def close(self) -> None:
        """Cancel all pending debounced invocations. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        self._debouncer.cancel_all()
        _logger.debug("Machine closed in state %r", self._store.state)
