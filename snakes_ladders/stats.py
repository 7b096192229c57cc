"""Monte Carlo statistics: how many turns does a game take?"""

from __future__ import annotations

import statistics
from dataclasses import dataclass

from snakes_ladders.board import REFERENCE_TOPOLOGY, BoardTopology
from snakes_ladders.engine import Phase, RandomRolls, RollSource, TurnEngine

MAX_TURNS = 1000  # safety valve against endless games


def simulate_game(
    topology: BoardTopology,
    rolls: RollSource,
    max_turns: int = MAX_TURNS,
) -> int | None:
    """Turns needed to win a fresh game, or ``None`` if *max_turns* runs out."""
    engine = TurnEngine(topology=topology, rolls=rolls)
    for turn in range(1, max_turns + 1):
        engine.roll_turn()
        if engine.phase is Phase.WON:
            return turn
    return None


def simulate(
    games: int,
    seed: int | None = None,
    topology: BoardTopology = REFERENCE_TOPOLOGY,
    max_turns: int = MAX_TURNS,
) -> list[int | None]:
    """Play *games* independent games from one seeded die."""
    if games < 1:
        raise ValueError(f"Need at least one game, got {games}.")
    rolls = RandomRolls(seed)
    return [simulate_game(topology, rolls, max_turns) for _ in range(games)]


@dataclass
class TurnStats:
    games: int
    finished: int
    mean: float | None = None
    median: float | None = None
    shortest: int | None = None
    longest: int | None = None


def summarize(results: list[int | None]) -> TurnStats:
    finished = [r for r in results if r is not None]
    if not finished:
        return TurnStats(games=len(results), finished=0)
    return TurnStats(
        games=len(results),
        finished=len(finished),
        mean=statistics.fmean(finished),
        median=statistics.median(finished),
        shortest=min(finished),
        longest=max(finished),
    )
