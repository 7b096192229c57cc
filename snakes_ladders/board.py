"""Board topology for Snakes & Ladders: track length and shortcut maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

BOARD_SIZE = 100
ROW_WIDTH = 10

# fmt: off
# Snakes (go DOWN)
DESCENTS: dict[int, int] = {
    16:  6,  47: 26,  49: 11,  56: 53,  62: 19,
    64: 60,  87: 24,  93: 73,  95: 75,  98: 78,
}

# Ladders (go UP)
ASCENTS: dict[int, int] = {
     1: 38,   4: 14,   9: 31,  21: 42,  28: 84,
    36: 44,  51: 67,  71: 91,  80: 100,
}
# fmt: on


class ConfigurationError(ValueError):
    """The board topology violates one of its invariants."""


@dataclass(frozen=True)
class BoardTopology:
    """Immutable track description. Validated eagerly on construction."""

    size: int = BOARD_SIZE
    row_width: int = ROW_WIDTH
    descents: Mapping[int, int] = field(default_factory=lambda: dict(DESCENTS))
    ascents: Mapping[int, int] = field(default_factory=lambda: dict(ASCENTS))

    def __post_init__(self) -> None:
        object.__setattr__(self, "descents", MappingProxyType(dict(self.descents)))
        object.__setattr__(self, "ascents", MappingProxyType(dict(self.ascents)))
        self._validate()

    def _validate(self) -> None:
        if self.size < 2:
            raise ConfigurationError(f"Board needs at least 2 squares, got {self.size}.")
        if self.row_width < 1 or self.size % self.row_width:
            raise ConfigurationError(
                f"Row width {self.row_width} does not divide board size {self.size}."
            )

        for name, mapping in (("descent", self.descents), ("ascent", self.ascents)):
            for origin, dest in mapping.items():
                for square in (origin, dest):
                    if not 1 <= square <= self.size:
                        raise ConfigurationError(
                            f"{name.capitalize()} {origin} -> {dest} leaves the board "
                            f"(squares 1-{self.size})."
                        )
                if origin == self.size:
                    raise ConfigurationError(
                        f"The final square {self.size} cannot start a {name}."
                    )

        for origin, dest in self.descents.items():
            if dest >= origin:
                raise ConfigurationError(f"Descent {origin} -> {dest} does not go down.")
        for origin, dest in self.ascents.items():
            if dest <= origin:
                raise ConfigurationError(f"Ascent {origin} -> {dest} does not go up.")

        shared = set(self.descents) & set(self.ascents)
        if shared:
            raise ConfigurationError(
                f"Squares {sorted(shared)} start both a descent and an ascent."
            )

        origins = set(self.descents) | set(self.ascents)
        chained = sorted(
            dest for dest in [*self.descents.values(), *self.ascents.values()]
            if dest in origins
        )
        if chained:
            raise ConfigurationError(
                f"Shortcut destinations {chained} are themselves shortcut origins."
            )

    def __hash__(self) -> int:
        # Mapping proxies are unhashable; hash their contents instead.
        return hash((
            self.size,
            self.row_width,
            frozenset(self.descents.items()),
            frozenset(self.ascents.items()),
        ))

    def descent_of(self, square: int) -> int | None:
        return self.descents.get(square)

    def ascent_of(self, square: int) -> int | None:
        return self.ascents.get(square)

    def is_descent(self, square: int) -> bool:
        return square in self.descents

    def is_ascent(self, square: int) -> bool:
        return square in self.ascents


REFERENCE_TOPOLOGY = BoardTopology()
