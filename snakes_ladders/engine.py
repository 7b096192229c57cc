"""Turn engine — owns the token and resolves one roll at a time."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Generator, Iterable, Iterator, Protocol

from snakes_ladders.board import REFERENCE_TOPOLOGY, BoardTopology
from snakes_ladders.events import EngineObserver, Event, EventKind, ListObserver

logger = logging.getLogger(__name__)

START_POSITION = 1
DIE_FACES = 6


class InvalidTransition(RuntimeError):
    """A roll was requested while the engine was not accepting one."""


class RollSourceExhausted(IndexError):
    """A scripted roll source ran out of rolls."""


# ── Roll sources ─────────────────────────────────────────────────────

class RollSource(Protocol):
    """Anything that produces uniformly distributed die faces in 1..6."""

    def roll(self) -> int: ...


class RandomRolls:
    """Fair die backed by :class:`random.Random`."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def roll(self) -> int:
        return self._rng.randint(1, DIE_FACES)


class ScriptedRolls:
    """Forced roll sequence, for tests and replays."""

    def __init__(self, faces: Iterable[int]):
        self.faces = list(faces)
        for face in self.faces:
            if not 1 <= face <= DIE_FACES:
                raise ValueError(f"Die face must be 1-{DIE_FACES}, got {face}.")
        self._idx = 0

    def roll(self) -> int:
        if self._idx >= len(self.faces):
            raise RollSourceExhausted(f"All {len(self.faces)} scripted rolls used.")
        face = self.faces[self._idx]
        self._idx += 1
        return face

    def rewind(self) -> None:
        self._idx = 0


# ── State ────────────────────────────────────────────────────────────

class Phase(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    WON = "won"


@dataclass
class GameState:
    """Mutable state owned by a single engine."""

    position: int = START_POSITION
    phase: Phase = Phase.IDLE

    @property
    def turn_in_progress(self) -> bool:
        return self.phase is Phase.RESOLVING


# ── Engine ───────────────────────────────────────────────────────────

class TurnEngine:
    """Single-player game: roll, move, take at most one shortcut, check for a win.

    A turn is a generator of events. Every ``yield`` is a point where the
    caller may pause (to animate) before asking for the next event, so the
    engine itself never sleeps. :meth:`roll_turn` runs a turn straight
    through; :class:`~snakes_ladders.pacing.TurnPacer` runs one with delays.
    """

    def __init__(
        self,
        topology: BoardTopology = REFERENCE_TOPOLOGY,
        rolls: RollSource | None = None,
        observer: EngineObserver | None = None,
        cosmetic_rolls: int = 0,
        cosmetic_seed: int | None = None,
    ):
        self.topology = topology
        self.rolls = rolls or RandomRolls()
        self.observer = observer or ListObserver()
        self.cosmetic_rolls = cosmetic_rolls
        # Separate generator so flicker digits never consume real rolls;
        # re-seeded on reset so a replayed game flickers the same way.
        self.cosmetic_seed = cosmetic_seed
        self._cosmetic_rng = random.Random(cosmetic_seed)
        self.state = GameState()
        self._turn: Generator[Event, None, None] | None = None

    @property
    def position(self) -> int:
        return self.state.position

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def start_turn(self) -> Iterator[Event]:
        """Commit to a turn and return its events lazily.

        Raises :class:`InvalidTransition` unless the engine is idle. The
        engine stays ``RESOLVING`` until the returned iterator is drained
        or :meth:`reset` is called.
        """
        if self.state.phase is not Phase.IDLE:
            raise InvalidTransition(f"Cannot roll while {self.state.phase.value}.")
        self.state.phase = Phase.RESOLVING
        self._turn = self._resolve()
        return self._deliver(self._turn)

    def roll_turn(self) -> list[Event]:
        """Play one whole turn. A no-op returning ``[]`` unless idle."""
        try:
            turn = self.start_turn()
        except InvalidTransition as exc:
            logger.debug("Ignoring roll: %s", exc)
            return []
        return list(turn)

    def reset(self) -> Event:
        """Back to square 1, abandoning any turn still being resolved."""
        if self._turn is not None:
            self._turn.close()
            self._turn = None
        self._cosmetic_rng = random.Random(self.cosmetic_seed)
        self.state.position = START_POSITION
        self.state.phase = Phase.IDLE
        logger.info("Game reset")
        event = Event(EventKind.RESET, START_POSITION)
        self.observer.on_event(event)
        return event

    def _deliver(self, turn: Iterator[Event]) -> Iterator[Event]:
        # A closed turn simply stops, so a reset inside on_event ends delivery.
        for event in turn:
            self.observer.on_event(event)
            yield event

    def _resolve(self) -> Generator[Event, None, None]:
        state = self.state
        size = self.topology.size

        for _ in range(self.cosmetic_rolls):
            digit = self._cosmetic_rng.randint(1, DIE_FACES)
            yield Event(EventKind.COSMETIC_ROLL, state.position, value=digit)

        try:
            roll = self.rolls.roll()
        except Exception:
            state.phase = Phase.IDLE
            raise
        logger.debug("Rolled %d from square %d", roll, state.position)
        yield Event(EventKind.ROLL_COMMITTED, state.position, value=roll)

        candidate = state.position + roll

        # Overshoot → stay put, turn wasted
        if candidate > size:
            state.phase = Phase.IDLE
            yield Event(EventKind.OVERSHOOT, state.position, value=size - state.position)
            return

        state.position = candidate
        yield Event(EventKind.MOVED, candidate)

        if candidate == size:
            state.phase = Phase.WON
            logger.debug("Landed on %d, game won", size)
            yield Event(EventKind.VICTORY, candidate)
            return

        # At most one shortcut per turn; descents take precedence.
        dest = self.topology.descent_of(candidate)
        if dest is not None:
            state.position = dest
            yield Event(EventKind.DESCENDED, dest, origin=candidate)
        else:
            dest = self.topology.ascent_of(candidate)
            if dest is not None:
                state.position = dest
                yield Event(EventKind.ASCENDED, dest, origin=candidate)

        if state.position == size:
            state.phase = Phase.WON
            logger.debug("Climbed to %d, game won", size)
            yield Event(EventKind.VICTORY, state.position)
        else:
            state.phase = Phase.IDLE
            yield Event(EventKind.AWAITING_ROLL, state.position)
