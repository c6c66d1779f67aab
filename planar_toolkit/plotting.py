# plotting.py
import numpy as np
from matplotlib.figure import Figure

from .geometry import as_points
from .polynomial import evaluate_polynomial


# ============================================================
# Helpers
# ============================================================
def make_figure(figsize=(7, 7), title=None):
    """Figure + axes without any GUI backend; save with fig.savefig(...)."""
    fig = Figure(figsize=figsize, dpi=100)
    ax = fig.add_subplot(111)
    if title:
        ax.set_title(title)
    return fig, ax


# ============================================================
# Tours
# ============================================================
def plot_points_with_paths(points, path_orders=None, labels=None, title: str = ""):
    """Scatter the points and draw one polyline per visiting order."""
    points = as_points(points)
    fig, ax = make_figure(title=title)

    ax.scatter(points[:, 0], points[:, 1], color='red', zorder=5, label='Points')

    colors = ["tab:blue", "tab:orange", "tab:green", "tab:purple", "tab:brown"]
    for idx, order in enumerate(path_orders or []):
        ordered = points[np.asarray(order, dtype=int)]
        lbl = labels[idx] if labels else f"path {idx}"
        ax.plot(ordered[:, 0], ordered[:, 1], '-o',
                color=colors[idx % len(colors)], lw=1.5, ms=4, label=lbl)

        # mark the start of each path
        ax.scatter([ordered[0, 0]], [ordered[0, 1]], s=90, marker="s",
                   color=colors[idx % len(colors)], zorder=6)

    ax.set_aspect('equal')
    ax.legend()
    return fig


# ============================================================
# Centers
# ============================================================
def plot_centers(points, center, centroid=None, title: str = "Geometric median"):
    points = as_points(points)
    fig, ax = make_figure(figsize=(6, 6), title=title)

    ax.scatter(points[:, 0], points[:, 1], s=20, alpha=0.6, color="black", label="points")
    ax.scatter([center[0]], [center[1]], marker="^", s=100, color="red", label="geometric median")
    if centroid is not None:
        ax.scatter([centroid[0]], [centroid[1]], marker="o", s=80, color="dodgerblue", label="centroid")

    ax.set_aspect('equal')
    ax.legend()
    return fig


# ============================================================
# Polynomial fit
# ============================================================
def plot_polynomial_fit(points, coefficients, samples: int = 200, title: str = None):
    """Samples plus the fitted curve over their x range."""
    points = as_points(points)
    if title is None:
        title = f"Least-squares fit, degree {len(coefficients) - 1}"
    fig, ax = make_figure(figsize=(7, 5), title=title)

    ax.scatter(points[:, 0], points[:, 1], color="black", zorder=5, label="samples")

    x_min, x_max = points[:, 0].min(), points[:, 0].max()
    if x_min == x_max:
        x_min, x_max = x_min - 1, x_max + 1
    xs = np.linspace(x_min, x_max, samples)
    ax.plot(xs, evaluate_polynomial(coefficients, xs), color="tab:blue", lw=2, label="fit")

    ax.legend()
    return fig
