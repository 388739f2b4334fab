"""
Compact passer rating strip: 1200×180, dark background.

One row per player on a fixed 6-column grid: name, the four weighted components
(shown against the 2.375 cap, with a fill bar), and the final rating.
"""

from pathlib import Path
from typing import List

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt

from qbrating.config import MAX_RATING, MAX_WEIGHT
from qbrating.core.rating import RatingResult

BG = "#1a1a2e"


def _rating_color(rating: float) -> str:
    """Green for 100+, amber for league-average range, red below 70."""
    if rating >= 100.0:
        return "#7bc96f"
    if rating >= 70.0:
        return "#ffd166"
    return "#e57373"


def render_rating_card(
    player: str,
    result: RatingResult,
    outpath: str = "outputs/rating_card.png",
) -> str:
    """Render the strip for one player and return the resolved output path."""
    path = Path(outpath)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig = plt.figure(figsize=(12, 1.8), dpi=100)
    fig.patch.set_facecolor(BG)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.axis("off")
    ax.set_facecolor(BG)

    ax.text(0.5, 0.93, "NFL Passer Rating", ha="center", va="top", fontsize=13, color="#e0e0e0", fontweight="bold")

    headers = ["Player", "Comp %", "Yds / Att", "TD %", "INT %", "Rating"]
    n_cols = len(headers)
    col_edges: List[float] = [0.02, 0.24, 0.39, 0.54, 0.69, 0.84, 0.98]
    centers = [(col_edges[i] + col_edges[i + 1]) / 2 for i in range(n_cols)]

    y_header = 0.68
    y_row = 0.36
    y_top = 0.80
    y_bottom = 0.14

    for x in col_edges[1:-1]:
        ax.plot([x, x], [y_bottom, y_top], color="#ffffff", linewidth=1.0, alpha=0.35)
    ax.plot([col_edges[0], col_edges[-1]], [y_top, y_top], color="#ffffff", linewidth=1.2, alpha=0.40)
    ax.plot([col_edges[0], col_edges[-1]], [y_bottom, y_bottom], color="#ffffff", linewidth=1.2, alpha=0.40)
    ax.plot([col_edges[0], col_edges[-1]], [0.58, 0.58], color="#ffffff", linewidth=1.0, alpha=0.35)

    for i, h in enumerate(headers):
        ax.text(centers[i], y_header, h, ha="center", va="center", fontsize=11, fontweight="bold", color="#cfcfcf")

    ax.text(col_edges[0] + 0.01, y_row, player, ha="left", va="center", fontsize=16, fontweight="bold", color="#ffffff")

    # Component cells: value plus a bar filled to value / MAX_WEIGHT
    components = result.components
    values = [components.completion, components.yards_per_attempt, components.touchdown, components.interception]
    for i, v in enumerate(values, start=1):
        left = col_edges[i] + 0.015
        width = col_edges[i + 1] - col_edges[i] - 0.03
        ax.text(centers[i], y_row + 0.06, f"{v:.3f}", ha="center", va="center", fontsize=16, color="#6ab7ff")
        ax.add_patch(mpatches.Rectangle((left, 0.20), width, 0.05, color="#ffffff", alpha=0.15, linewidth=0))
        ax.add_patch(mpatches.Rectangle((left, 0.20), width * float(v / MAX_WEIGHT), 0.05, color="#6ab7ff", linewidth=0))

    ax.text(
        centers[5],
        y_row,
        f"{result.rating:.1f}",
        ha="center",
        va="center",
        fontsize=24,
        fontweight="bold",
        color=_rating_color(result.rating),
    )

    ax.text(
        0.5,
        0.05,
        f"Components are clamped to 0–{MAX_WEIGHT}; rating = sum / 6 × 100 (max {MAX_RATING}).",
        ha="center",
        va="center",
        fontsize=9,
        color="#b0b0b0",
        fontweight="bold",
    )
    plt.savefig(path, dpi=150, bbox_inches="tight", pad_inches=0.15, facecolor=BG, edgecolor="none")
    plt.close(fig)
    return str(path.resolve())
