"""Per-event debounce timers on top of an asyncio event loop."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable

_logger = logging.getLogger(__name__)


@dataclass
class _Pending:
    handle: asyncio.TimerHandle
    future: asyncio.Future[Any]


class Debouncer:
    """Delays calls to ``invoke`` keyed by event name.

    At most one timer is outstanding per event name. Scheduling an event
    that already has a timer cancels the old one, whatever its wait was, and
    resolves the superseded future to ``None``.
    """

    def __init__(
        self,
        invoke: Callable[..., Any],
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._invoke = invoke
        self._loop = loop
        self._pending: dict[str, _Pending] = {}

    def schedule(self, event: str, wait_ms: float, *args: Any, **kwargs: Any) -> asyncio.Future[Any]:
        """Start a ``wait_ms`` timer for ``event`` and return its result future.

        The timer runs whether or not the future is awaited. The future
        resolves to the return value of ``invoke``, to ``None`` when
        superseded, or carries the exception ``invoke`` raised. Cancelling
        the future cancels the timer.
        """
        loop = self._loop or asyncio.get_running_loop()
        self.cancel(event)
        future: asyncio.Future[Any] = loop.create_future()
        handle = loop.call_later(wait_ms / 1000, self._fire, event, future, args, kwargs)
        entry = _Pending(handle, future)
        self._pending[event] = entry
        future.add_done_callback(lambda f: self._discard(event, entry))
        _logger.debug("Debounce %r scheduled in %sms", event, wait_ms)
        return future

    def cancel(self, event: str) -> bool:
        """Cancel the pending timer for ``event``. Returns False if none was pending."""
        entry = self._pending.pop(event, None)
        if entry is None:
            return False
        entry.handle.cancel()
        if not entry.future.done():
            entry.future.set_result(None)
        _logger.debug("Debounce %r superseded", event)
        return True

    def cancel_all(self) -> None:
        for event in list(self._pending):
            self.cancel(event)

    def pending(self) -> list[str]:
        """Event names with an outstanding timer."""
        return list(self._pending)

    def _discard(self, event: str, entry: _Pending) -> None:
        if entry.future.cancelled() and self._pending.get(event) is entry:
            del self._pending[event]
            entry.handle.cancel()

    def _fire(
        self,
        event: str,
        future: asyncio.Future[Any],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        del self._pending[event]
        if future.cancelled():
            return
        _logger.debug("Debounce %r fired", event)
        try:
            result = self._invoke(event, *args, **kwargs)
        except Exception as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)
