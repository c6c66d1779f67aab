import logging
import os

import numpy as np

from .config import get_results_path
from .errors import InvalidInput

logger = logging.getLogger(__name__)


# -------------------------
# RANDOM INPUTS
# -------------------------
def random_points(n: int, seed=None) -> np.ndarray:
    """n points drawn uniformly from the unit square."""
    if n < 1:
        raise InvalidInput(f"need at least one point, got {n}")
    rng = np.random.default_rng(seed)
    return rng.uniform(0.0, 1.0, size=(n, 2))


def pick_random_combs(N: int, k: int, max_iter: int, seed=None):
    """Generate up to max_iter unique random k-subsets from N elements."""
    if not 1 <= k <= N:
        raise InvalidInput(f"subset size k={k} must be between 1 and N={N}")
    rng = np.random.default_rng(seed)

    seen = set()
    combs = []
    attempts = 0

    while len(combs) < max_iter and attempts < 10 * max_iter:
        sample = tuple(sorted(int(i) for i in rng.choice(N, k, replace=False)))
        if sample not in seen:
            seen.add(sample)
            combs.append(np.array(sample))
        attempts += 1

    if len(combs) < max_iter:
        logger.warning("Only %d unique combinations generated out of requested %d", len(combs), max_iter)
    return combs


# -------------------------
# FILE SAVING UTILS
# -------------------------
def result_filename(M, k, label, folder=None) -> str:
    folder = folder or get_results_path()
    return os.path.join(folder, f"grid_M{M}_set_k{k}_{label}.npz")


def save_result_to_file(
    points,
    tour,
    tour_cost,
    center,
    center_score,
    centroid_score,
    coefficients,
    M,
    k,
    label="result",
    folder=None,
):
    """
    Save one solver run (tour, medians, fitted polynomial) as a compressed .npz.
    Returns the written filename.
    """
    filename = result_filename(M, k, label, folder)
    os.makedirs(os.path.dirname(filename), exist_ok=True)

    np.savez_compressed(
        filename,
        points=np.asarray(points, float),
        tour=np.asarray(tour, int),
        tour_cost=tour_cost,
        center=np.asarray(center, float),
        center_score=center_score,
        centroid_score=centroid_score,
        coefficients=np.asarray(coefficients, float),
        M=M,
        k=k,
    )

    logger.info("Saved: %s", filename)
    return filename


def load_result_from_file(filename):
    """Load a result written by save_result_to_file."""
    with np.load(filename) as data:
        result = {
            "points": data["points"],
            "tour": data["tour"].tolist(),
            "tour_cost": data["tour_cost"].item(),
            "center": data["center"],
            "center_score": data["center_score"].item(),
            "centroid_score": data["centroid_score"].item(),
            "coefficients": data["coefficients"],
            "M": int(data["M"]),
            "k": int(data["k"]),
        }
    logger.debug("Loaded: %s", filename)
    return result
