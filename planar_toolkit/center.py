from dataclasses import dataclass
from math import isfinite

import numpy as np

from .config import DEFAULT_BOUNDS, DEFAULT_EPSILON, DEFAULT_SUBSEARCH
from .errors import InvalidInput
from .geometry import Metric, OCTANT_DIRECTIONS, _cost, as_points, center_of_mass


@dataclass(frozen=True)
class GeometricSearchOptions:
    """
    Parameters of the geometric median pattern search.

    epsilon   : step size at or below which the search stops (> 0)
    bounds    : initial step, as a multiple of the mean point-to-centroid cost (> 0)
    subsearch : step in all 8 directions instead of the 4 axis-aligned ones
    """
    epsilon: float = DEFAULT_EPSILON
    bounds: float = DEFAULT_BOUNDS
    subsearch: bool = DEFAULT_SUBSEARCH

    def __post_init__(self):
        self.validate()

    def validate(self):
        for name in ("epsilon", "bounds"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
                raise InvalidInput(f"{name} must be a number, got {value!r}")
            if not isfinite(value) or value <= 0:
                raise InvalidInput(f"{name} must be a finite value > 0, got {value!r}")


# -------------------------
# CENTER OF MASS
# -------------------------
def mass_center(points):
    """
    Centroid of the points and its Euclidean score (total distance to it).
    A cheap estimate of the geometric median. Returns (center, score).
    """
    pts = as_points(points)
    center = center_of_mass(pts)
    return center, _cost(pts, center[0], center[1], Metric.EUCLIDEAN)


# -------------------------
# GEOMETRIC MEDIAN
# -------------------------
def geometric_median(points, options: GeometricSearchOptions = None):
    """
    Point minimizing the total Euclidean distance to a point set.

    Derivative-free pattern search. Starting at the centroid with a step of
    ``score / n * bounds``, the search probes one step in each direction of a
    fixed table (8 directions with `subsearch`, else the 4 axis-aligned ones)
    and moves to the first candidate that strictly lowers the score, then
    rescans from the top. A full scan without improvement halves the step.
    The search ends once the step is no larger than `epsilon`.

    Parameters
    ----------
    points : array-like of shape (N, 2)
        Point set, N >= 1.
    options : GeometricSearchOptions, optional
        Search parameters (defaults: epsilon=1e-3, bounds=10, subsearch=False).

    Returns
    -------
    center : np.ndarray of shape (2,)
    score : float
        Total distance from `center` to the points.

    Notes
    -----
    Convergence is empirical hill-climbing: the first-improvement rule fixes
    the search path, and pathological configurations may stop short of the
    true minimum.
    """
    if options is None:
        options = GeometricSearchOptions()
    options.validate()
    pts = as_points(points)

    with np.errstate(over="ignore", invalid="ignore"):
        cx, cy = (float(c) for c in center_of_mass(pts))
        score = _cost(pts, cx, cy, Metric.EUCLIDEAN)
    step = score / len(pts) * options.bounds

    if not (isfinite(score) and isfinite(step)):
        raise InvalidInput(
            f"initial score {score!r} and step {step!r} must be finite; "
            f"coordinates or bounds are too large"
        )

    directions = OCTANT_DIRECTIONS if options.subsearch else OCTANT_DIRECTIONS[::2]

    while step > options.epsilon:
        improved = False
        for dx, dy in directions:
            nx = cx + step * dx
            ny = cy + step * dy
            # an overflowing candidate scores inf/nan and is never taken
            with np.errstate(over="ignore", invalid="ignore"):
                n_score = _cost(pts, nx, ny, Metric.EUCLIDEAN)

            if n_score < score:
                cx, cy, score = nx, ny, n_score
                improved = True
                break

        if not improved:
            step /= 2

    return np.array([cx, cy]), score
