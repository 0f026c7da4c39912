"""State store: current state, subscribers and the raw transition."""
from __future__ import annotations

import logging
from typing import Any

from reactive_fsm.dispatch import dispatch
from reactive_fsm.types import ENTER, EXIT, HandlerTable, State, Subscriber, Unsubscribe

_logger = logging.getLogger(__name__)


class StateStore:
    """Holds the current state and notifies subscribers when it changes.

    Subscribers follow the store contract: they are called once with the
    current state on registration and again after every transition.
    """

    def __init__(self, state: State, states: HandlerTable | None = None) -> None:
        self._state = state
        self._states: HandlerTable = states if states is not None else {}
        # Insertion-ordered set keyed by identity; callbacks need not be hashable.
        self._subscribers: dict[int, Subscriber] = {}

    @property
    def state(self) -> State:
        return self._state

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Register ``callback``, call it with the current state, return an unsubscriber."""
        self._subscribers[id(callback)] = callback
        callback(self._state)

        def unsubscribe() -> None:
            self._subscribers.pop(id(callback), None)

        return unsubscribe

    def dispatch(self, event: str, *args: Any, **kwargs: Any) -> Any:
        return dispatch(self._states, self._state, event, *args, **kwargs)

    def transition(self, new_state: State) -> None:
        """Exit the current state, swap in ``new_state``, notify, then enter it."""
        self.dispatch(EXIT)
        old = self._state
        self._state = new_state
        _logger.debug("Transition %r -> %r", old, new_state)
        for key, callback in list(self._subscribers.items()):
            if self._subscribers.get(key) is callback:
                callback(self._state)
        self.dispatch(ENTER)
