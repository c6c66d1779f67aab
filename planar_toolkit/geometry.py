from enum import Enum
from math import sqrt

import numpy as np

from .errors import InvalidInput


# -------------------------
# 1. METRICS
# -------------------------
class Metric(str, Enum):
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"


def as_metric(metric) -> Metric:
    """Normalize a metric name ("euclidean" / "manhattan", any case) to a Metric."""
    if isinstance(metric, Metric):
        return metric
    try:
        return Metric(str(metric).lower())
    except ValueError:
        raise InvalidInput(f"unknown metric {metric!r}, expected 'euclidean' or 'manhattan'") from None


# -------------------------
# 2. INPUT NORMALIZATION
# -------------------------
def as_points(points, allow_empty: bool = False) -> np.ndarray:
    """
    Copy an array-like of 2D points into a fresh (n, 2) float64 array.
    Rejects ragged input, the wrong shape, NaN/inf and (unless allowed) an empty set.
    """
    try:
        pts = np.array(points, dtype=float)
    except (TypeError, ValueError) as err:
        raise InvalidInput(f"points must be a sequence of (x, y) pairs: {err}") from err

    if pts.size == 0:
        if allow_empty:
            return pts.reshape(0, 2)
        raise InvalidInput("point set is empty")

    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidInput(f"points must have shape (n, 2), got {pts.shape}")
    if not np.all(np.isfinite(pts)):
        raise InvalidInput("points must have finite coordinates")
    return pts


# -------------------------
# 3. GRID GENERATION
# -------------------------
def generate_grid_points(M: int) -> np.ndarray:
    """Generate a uniform MxM grid of points in [0,1]^2 (cell centers)."""
    if M < 1:
        raise InvalidInput(f"grid size must be positive, got {M}")
    step = 1 / M
    half_step = step / 2
    coords = np.arange(M) * step + half_step
    xs, ys = np.meshgrid(coords, coords, indexing="ij")
    return np.column_stack([xs.ravel(), ys.ravel()])


# -------------------------
# 4. COST FUNCTION
# -------------------------
# Unit steps at 45 degree increments, starting west and turning clockwise.
# Even indices are the four axis-aligned directions.
#
#            (0,1)
#     (-S2,S2)   (S2,S2)
#  (-1,0)      x       (1,0)
#     (-S2,-S2)  (S2,-S2)
#           (0,-1)
S2 = sqrt(2) / 2
OCTANT_DIRECTIONS = (
    (-1.0, 0.0),
    (-S2, S2),
    (0.0, 1.0),
    (S2, S2),
    (1.0, 0.0),
    (S2, -S2),
    (0.0, -1.0),
    (-S2, -S2),
)


def _distances(pts: np.ndarray, x: float, y: float, metric: Metric) -> np.ndarray:
    dx = pts[:, 0] - x
    dy = pts[:, 1] - y
    if metric is Metric.MANHATTAN:
        return np.abs(dx) + np.abs(dy)
    return np.hypot(dx, dy)


def _cost(pts: np.ndarray, x: float, y: float, metric: Metric) -> float:
    # no validation, callers have already normalized pts
    return float(np.sum(_distances(pts, x, y, metric)))


def cost(points, x: float, y: float, metric="euclidean") -> float:
    """
    Total distance from (x, y) to every point under the chosen metric.

    Euclidean uses hypot(dx, dy), Manhattan uses |dx| + |dy|.
    Raises InvalidInput for an empty point set.
    """
    pts = as_points(points)
    metric = as_metric(metric)
    if not (np.isfinite(x) and np.isfinite(y)):
        raise InvalidInput(f"candidate point must be finite, got ({x}, {y})")
    return _cost(pts, float(x), float(y), metric)


def center_of_mass(points) -> np.ndarray:
    """Arithmetic mean (centroid) of a point set, all points weighted equally."""
    pts = as_points(points)
    return pts.sum(axis=0) / len(pts)


# -------------------------
# 5. COST MATRIX / PATHS
# -------------------------
def pairwise_cost_matrix(points, metric="euclidean") -> np.ndarray:
    """
    Square matrix of point-to-point costs; matrix[i, j] is the distance from
    point i to point j, and the diagonal is exactly zero.
    """
    pts = as_points(points)
    metric = as_metric(metric)

    # Vectorized pairwise differences, one row per origin point
    with np.errstate(over="ignore", invalid="ignore"):
        diff = pts[:, None, :] - pts[None, :, :]
        if metric is Metric.MANHATTAN:
            matrix = np.sum(np.abs(diff), axis=2)
        else:
            matrix = np.hypot(diff[:, :, 0], diff[:, :, 1])
    np.fill_diagonal(matrix, 0.0)

    if not np.all(np.isfinite(matrix)):
        raise InvalidInput("point-to-point costs overflow the float range")
    return matrix


def compute_path_cost(points, order, metric="euclidean") -> float:
    """Length of the open path visiting `points` in `order` (no return leg)."""
    pts = as_points(points)
    metric = as_metric(metric)
    order = np.asarray(order, dtype=int).ravel()

    if order.size and (order.min() < 0 or order.max() >= len(pts)):
        raise InvalidInput(f"order refers to indices outside 0..{len(pts) - 1}")
    if order.size < 2:
        return 0.0

    ordered = pts[order]
    steps = np.diff(ordered, axis=0)
    if metric is Metric.MANHATTAN:
        return float(np.sum(np.abs(steps)))
    return float(np.sum(np.hypot(steps[:, 0], steps[:, 1])))
