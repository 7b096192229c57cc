"""Terminal renderer — draws the board and status line from engine events."""

from __future__ import annotations

import sys
from typing import TextIO

from snakes_ladders.board import BoardTopology, REFERENCE_TOPOLOGY
from snakes_ladders.events import Event, EventKind

START_MESSAGE = "Start the game!"
ROLLING_MESSAGE = "Rolling..."


def cell_of(square: int, size: int, row_width: int) -> tuple[int, int]:
    """Grid ``(row, col)`` of *square*, row 0 at the top.

    Squares zigzag: the bottom row runs left to right, the next one right
    to left, and so on.
    """
    if not 1 <= square <= size:
        raise ValueError(f"Square {square} is not on a board of {size}.")
    rows = size // row_width
    logic_row, offset = divmod(square - 1, row_width)
    col = offset if logic_row % 2 == 0 else row_width - 1 - offset
    return rows - 1 - logic_row, col


def status_line(event: Event) -> str | None:
    """Human-readable status for *event*, or ``None`` if it has none."""
    kind = event.kind
    if kind is EventKind.COSMETIC_ROLL:
        return None
    if kind is EventKind.ROLL_COMMITTED:
        return f"You rolled a {event.value}!"
    if kind is EventKind.OVERSHOOT:
        return f"Need {event.value} to win!"
    if kind is EventKind.MOVED:
        return f"Moved to {event.position}."
    if kind is EventKind.DESCENDED:
        return f"Oh no! A snake! Slid down to {event.position}"
    if kind is EventKind.ASCENDED:
        return f"Yay! A ladder! Climbed up to {event.position}"
    if kind is EventKind.VICTORY:
        return "YOU WIN!"
    if kind is EventKind.AWAITING_ROLL:
        return "Your turn to roll."
    if kind is EventKind.RESET:
        return START_MESSAGE
    return None


class TextRenderer:
    """Observer that prints the board after every move and a status line per event."""

    def __init__(
        self,
        topology: BoardTopology = REFERENCE_TOPOLOGY,
        out: TextIO | None = None,
    ):
        self.topology = topology
        self.out = out or sys.stdout
        self.position = 1
        self._rolling = False

    def on_event(self, event: Event) -> None:
        if event.kind is EventKind.COSMETIC_ROLL:
            if not self._rolling:
                self._rolling = True
                print(ROLLING_MESSAGE, file=self.out)
            # Dice flicker overwrites itself in place
            print(f"\r🎲 {event.value}", end="", file=self.out, flush=True)
            return
        self._rolling = False
        if event.kind is EventKind.ROLL_COMMITTED:
            print("\r", end="", file=self.out)

        moved = event.position != self.position
        self.position = event.position
        if moved or event.kind is EventKind.RESET:
            print(self.draw(), file=self.out)

        message = status_line(event)
        if message:
            print(message, file=self.out, flush=True)

    def draw(self) -> str:
        """The board as text: ``@`` marks the token, ``v``/``^`` mark snake heads and ladder feet."""
        size, width = self.topology.size, self.topology.row_width
        grid = [[""] * width for _ in range(size // width)]
        for square in range(1, size + 1):
            row, col = cell_of(square, size, width)
            if square == self.position:
                mark = "@"
            elif self.topology.is_descent(square):
                mark = "v"
            elif self.topology.is_ascent(square):
                mark = "^"
            else:
                mark = " "
            grid[row][col] = f"{square:>3}{mark}"
        return "\n".join(" ".join(cells) for cells in grid)
