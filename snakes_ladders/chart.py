"""Generate a histogram of turns-to-win from simulated games."""

from __future__ import annotations

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt

from snakes_ladders.stats import summarize


def make_turns_chart(
    results: list[int | None],
    output_path: str = "turns_histogram.png",
    title: str = "Snakes & Ladders — Turns to Win",
) -> str:
    """Create a histogram of game lengths, with the mean marked.

    Games that hit the turn cap are left out. Returns the path to the saved PNG.
    """
    finished = [r for r in results if r is not None]
    if not finished:
        raise ValueError("No finished games to chart.")
    stats = summarize(results)

    fig, ax = plt.subplots(figsize=(10, 5))
    bins = range(min(finished), max(finished) + 2)
    ax.hist(finished, bins=bins, color="#4A90D9", edgecolor="white")
    ax.axvline(stats.mean, color="#ff4d4d", linestyle="--", linewidth=2)
    ax.text(
        stats.mean, ax.get_ylim()[1] * 0.95,
        f" mean {stats.mean:.1f}",
        color="#ff4d4d", va="top", fontsize=11, fontweight="bold",
    )

    ax.set_xlabel("Turns to win")
    ax.set_ylabel("Games")
    ax.set_title(f"{title} ({stats.finished} games)", fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
