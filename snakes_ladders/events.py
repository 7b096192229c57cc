"""Events emitted by the turn engine, and the observer interface that consumes them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class EventKind(str, Enum):
    COSMETIC_ROLL = "cosmetic-roll"
    ROLL_COMMITTED = "roll-committed"
    OVERSHOOT = "overshoot"
    MOVED = "moved"
    DESCENDED = "descended"
    ASCENDED = "ascended"
    VICTORY = "victory"
    AWAITING_ROLL = "awaiting-roll"
    RESET = "reset"


@dataclass(frozen=True)
class Event:
    """One state change, as seen by a renderer.

    ``position`` is always the token's position when the event fired.
    ``value`` is the die face for roll events and the squares still needed
    for an overshoot. ``origin`` is the square a shortcut started from.
    """

    kind: EventKind
    position: int
    value: int | None = None
    origin: int | None = None


# ── Observer ────────────────────────────────────────────────────────

class EngineObserver(Protocol):
    """Receives events as a turn is resolved."""

    def on_event(self, event: Event) -> None: ...


@dataclass
class ListObserver:
    """Default observer — collects events into a list."""

    events: list[Event] = field(default_factory=list)

    def on_event(self, event: Event) -> None:
        self.events.append(event)
