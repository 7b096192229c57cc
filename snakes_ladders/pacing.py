"""Presentation timing — plays a turn with pauses so a renderer can animate it."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace

from snakes_ladders.engine import InvalidTransition, TurnEngine
from snakes_ladders.events import Event, EventKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Delays:
    """Seconds to wait after each kind of event."""

    flicker: float = 0.06  # between cosmetic dice digits
    settle: float = 0.6  # token slides to the landing square
    slide: float = 0.5  # token rides a snake or ladder

    @classmethod
    def none(cls) -> Delays:
        return cls(flicker=0.0, settle=0.0, slide=0.0)

    def scaled(self, factor: float) -> Delays:
        if factor < 0:
            raise ValueError(f"Speed factor must be non-negative, got {factor}.")
        return replace(
            self,
            flicker=self.flicker * factor,
            settle=self.settle * factor,
            slide=self.slide * factor,
        )

    def after(self, event: Event) -> float:
        if event.kind is EventKind.COSMETIC_ROLL:
            return self.flicker
        if event.kind is EventKind.MOVED:
            return self.settle
        if event.kind in (EventKind.DESCENDED, EventKind.ASCENDED):
            return self.slide
        return 0.0


class TurnPacer:
    """Drives the engine's turns on the running event loop."""

    def __init__(self, engine: TurnEngine, delays: Delays | None = None):
        self.engine = engine
        self.delays = delays or Delays()

    async def play_turn(self) -> list[Event]:
        """Play one turn, pausing after each event.

        Returns the events delivered. If the engine is already busy this
        is a no-op; if the engine is reset mid-turn, delivery stops at the
        next resumption.
        """
        try:
            turn = self.engine.start_turn()
        except InvalidTransition as exc:
            logger.debug("Ignoring roll: %s", exc)
            return []

        played: list[Event] = []
        for event in turn:
            played.append(event)
            # Always yield to the loop, even with no delay, so other tasks
            # (e.g. a reset) get a chance to run between events.
            await asyncio.sleep(self.delays.after(event))
        return played
