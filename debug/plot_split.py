"""Simple split visualization helpers for debugging."""

import matplotlib.pyplot as plt
from shapely.geometry import LineString, Polygon

from polycut import split
from polycut.core.geometry_utils import as_ring, to_shapely_polygon


def plot_split(polygon, cut, title: str = "Polygon Split"):
    """Plot a polygon with its cut next to the two resulting pieces.

    Args:
        polygon: Polygon accepted by :func:`polycut.split`
        cut: Cut segment accepted by :func:`polycut.split`
        title: Plot title
    """
    result = split(polygon, cut)
    ring = as_ring(polygon)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    # Original with the cut drawn over it
    _plot_polygon(ax1, to_shapely_polygon(ring), color='gray', alpha=0.3)
    _plot_cut(ax1, cut)
    ax1.set_title("Original")

    # Pieces (or the untouched polygon when there was no split)
    if result:
        piece1, piece2 = result.to_shapely()
        _plot_polygon(ax2, piece1, color='blue', alpha=0.5)
        _plot_polygon(ax2, piece2, color='green', alpha=0.5)
        ax2.set_title(f"Split ({len(result.crossings)} crossings)")
    else:
        _plot_polygon(ax2, to_shapely_polygon(ring), color='gray', alpha=0.3)
        ax2.set_title("No split")

    for ax in (ax1, ax2):
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)
        # Screen coordinates grow downwards
        ax.invert_yaxis()

    fig.suptitle(title)
    plt.tight_layout()
    plt.show()


def _plot_cut(ax, cut, color='red'):
    x, y = LineString(cut).xy
    ax.plot(x, y, color=color, linewidth=2)


def _plot_polygon(ax, poly: Polygon, color='blue', alpha=0.5):
    x, y = poly.exterior.xy
    ax.fill(x, y, color=color, alpha=alpha, edgecolor='black', linewidth=1.5)


if __name__ == "__main__":
    sample = [
        (100, 100),
        (200, 50),
        (300, 50),
        (400, 200),
        (350, 250),
        (200, 300),
        (150, 300),
    ]
    plot_split(sample, [(50, 150), (450, 200)], title="Sample polygon")
