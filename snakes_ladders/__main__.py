"""CLI entry point: python -m snakes_ladders {play,simulate,chart}."""

from __future__ import annotations

import argparse
import asyncio
import logging

from snakes_ladders.chart import make_turns_chart
from snakes_ladders.engine import Phase, RandomRolls, TurnEngine
from snakes_ladders.pacing import Delays, TurnPacer
from snakes_ladders.render import TextRenderer
from snakes_ladders.stats import MAX_TURNS, simulate, summarize

PROMPT = "[Enter] roll  [r] reset  [q] quit > "


# ── play ─────────────────────────────────────────────────────────────

def cmd_play(args: argparse.Namespace) -> None:
    """Interactive game in the terminal."""
    engine = TurnEngine(
        rolls=RandomRolls(args.seed),
        observer=TextRenderer(),
        cosmetic_rolls=args.flicker,
        cosmetic_seed=args.seed,
    )
    pacer = TurnPacer(engine, Delays().scaled(args.delay_scale))
    engine.reset()  # draws the starting board

    while True:
        try:
            command = input(PROMPT).strip().lower()
        except EOFError:
            break
        if command == "q":
            break
        if command == "r":
            engine.reset()
            continue
        if engine.phase is Phase.WON:
            print("Game over. Press r to play again or q to quit.")
            continue
        asyncio.run(pacer.play_turn())


# ── simulate ─────────────────────────────────────────────────────────

def cmd_simulate(args: argparse.Namespace) -> None:
    """Play many games unattended and print a summary."""
    results = simulate(args.games, seed=args.seed, max_turns=args.max_turns)
    stats = summarize(results)

    print("\nTurns to win")
    print("=" * 40)
    print(f"  {'games':20s} {stats.games:>8d}")
    print(f"  {'finished':20s} {stats.finished:>8d}")
    if stats.finished:
        print(f"  {'mean':20s} {stats.mean:>8.1f}")
        print(f"  {'median':20s} {stats.median:>8.1f}")
        print(f"  {'shortest':20s} {stats.shortest:>8d}")
        print(f"  {'longest':20s} {stats.longest:>8d}")


# ── chart ────────────────────────────────────────────────────────────

def cmd_chart(args: argparse.Namespace) -> None:
    """Simulate games and save a histogram of their lengths."""
    results = simulate(args.games, seed=args.seed, max_turns=args.max_turns)
    out = args.output or "turns_histogram.png"
    make_turns_chart(results, output_path=out)
    print(f"Chart saved to {out}")


# ── main ─────────────────────────────────────────────────────────────

def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="snakes_ladders",
        description="Single-player Snakes & Ladders",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", help="Play in the terminal")
    p_play.add_argument("--seed", type=int, help="Seed the die")
    p_play.add_argument(
        "--delay-scale", type=_non_negative_float, default=1.0,
        help="Multiply animation delays (0 disables them)",
    )
    p_play.add_argument(
        "--flicker", type=_non_negative_int, default=10,
        help="Decorative dice digits shown before each roll (default 10)",
    )

    for name, help_text in (
        ("simulate", "Simulate games and summarize their length"),
        ("chart", "Simulate games and chart their length"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--games", type=_positive_int, default=1000, help="Games to simulate")
        p.add_argument("--seed", type=int, help="Seed the die")
        p.add_argument("--max-turns", type=_positive_int, default=MAX_TURNS, help="Max turns per game")
        if name == "chart":
            p.add_argument("--output", "-o", help="Output PNG path")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "chart":
        cmd_chart(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
