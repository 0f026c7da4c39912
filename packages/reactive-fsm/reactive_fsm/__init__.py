"""reactive-fsm - Finite state machine with a subscribable current state."""
from __future__ import annotations

from reactive_fsm.config import MachineConfig
from reactive_fsm.facade import EventInvoker, MachineProxy, SubscribeInvoker, fsm, machine_of
from reactive_fsm.machine import Machine
from reactive_fsm.store import StateStore
from reactive_fsm.types import ENTER, EXIT, INIT, FSMError, MachineClosedError

__all__ = [
    "fsm",
    "machine_of",
    "Machine",
    "MachineConfig",
    "MachineProxy",
    "EventInvoker",
    "SubscribeInvoker",
    "StateStore",
    "FSMError",
    "MachineClosedError",
    "INIT",
    "EXIT",
    "ENTER",
]
