"""
Position Chart for Bumps Results Processing

This module draws the classic bumps chart: one line per crew, day on the
x-axis and race-wide position on the (inverted) y-axis, with division
boundaries marked.
"""

from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt

BLADES_COLOR = "#2E86AB"
SPOONS_COLOR = "#C73E1D"
CREW_COLOR = "#555555"


def plot_position_trails(payload: Dict, output_path: Path) -> Path:
    """
    Render an event's position trails to an image file.

    Crews with blades and spoons are drawn in highlight colors and labelled
    at their finishing position.

    Args:
        payload: Event payload from build_event_payload().
        output_path: Path to save the plot (format from the suffix).

    Returns:
        The output_path for convenience.
    """
    crews = payload["crews"]
    days = payload["days"]

    fig, ax = plt.subplots(figsize=(4 + days, max(4, len(crews) * 0.25)))

    for crew in crews:
        x = [value["day"] for value in crew["values"]]
        y = [value["pos"] for value in crew["values"]]

        if crew["blades"] and len(x) > 1:
            color, width = BLADES_COLOR, 2.5
        elif crew["spoons"] and len(x) > 1:
            color, width = SPOONS_COLOR, 2.5
        else:
            color, width = CREW_COLOR, 1.0

        ax.plot(x, y, color=color, linewidth=width, marker="o", markersize=3)
        ax.text(x[-1] + 0.1, y[-1], crew["name"] or "", va="center", fontsize=7)

    # Division boundaries sit half a place above each division's first crew
    for division in payload["divisions"][1:]:
        ax.axhline(division["start"] - 0.5, color="black", alpha=0.3, linestyle="--")

    ax.set_xlim(-0.25, days + 1.5)
    ax.set_xticks(range(days + 1))
    ax.set_xlabel("Day", fontsize=11, fontweight="bold")
    ax.set_ylabel("Position", fontsize=11, fontweight="bold")
    ax.invert_yaxis()
    ax.grid(True, alpha=0.3, axis="x", linestyle="--")

    plt.suptitle(f"{payload['set']} {payload['year']} ({payload['gender']})",
                 fontsize=14, fontweight="bold")
    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)

    return output_path
