"""Machine configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MachineConfig:
    """Immutable configuration for a :class:`~reactive_fsm.machine.Machine`.

    Attributes:
        debounce_wait_ms: Delay used by ``debounce`` when no wait is given.
    """

    debounce_wait_ms: float = 100.0

    def __post_init__(self) -> None:
        if self.debounce_wait_ms < 0:
            raise ValueError("debounce_wait_ms must be non-negative")
