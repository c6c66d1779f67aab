import logging

import numpy as np

from .center import GeometricSearchOptions, geometric_median, mass_center
from .errors import NumericalInstability
from .geometry import compute_path_cost, generate_grid_points
from .heuristics import nearest_neighbor_tour
from .polynomial import polynomial_fit
from .utils import pick_random_combs, save_result_to_file

logger = logging.getLogger(__name__)


# -------------------------
# SINGLE SUBSET
# -------------------------
def evaluate_subset(subset, options=None, metric="euclidean", degree=1):
    """
    Run all three solvers on one point subset.
    Returns a dict with the tour, its cost, both centers and the fit.
    """
    center, center_score = geometric_median(subset, options)
    centroid, centroid_score = mass_center(subset)
    tour = nearest_neighbor_tour(subset, 0, metric)
    tour_cost = compute_path_cost(subset, tour, metric)

    try:
        coefficients = polynomial_fit(subset, degree)
    except NumericalInstability as err:
        logger.warning("No polynomial fit for subset of %d points: %s", len(subset), err)
        coefficients = np.array([], dtype=float)

    improvement = 0.0 if centroid_score == 0 else (centroid_score - center_score) / centroid_score

    return {
        "points": subset,
        "tour": tour,
        "tour_cost": tour_cost,
        "center": center,
        "center_score": center_score,
        "centroid": centroid,
        "centroid_score": centroid_score,
        "improvement": improvement,
        "coefficients": coefficients,
    }


# -------------------------
# MAIN RANDOMIZED SEARCH
# -------------------------
def find_worst_subset_randomized(
    M,
    k,
    max_iter=50,
    options=None,
    metric="euclidean",
    degree=1,
    seed=None,
    save=True,
    folder=None,
):
    """
    Draw random k-subsets of an MxM grid and run every solver on each.

    Keeps two extremes: the subset where the geometric median improves most
    on the centroid ("median"), and the subset with the longest
    nearest-neighbor tour ("tour"). Both are saved when `save` is set.
    Returns {label: result dict}, with a "filename" entry for saved results.
    """
    if options is None:
        options = GeometricSearchOptions()

    all_points = generate_grid_points(M)
    N = len(all_points)
    logger.info("Grid generated with %d points (%dx%d)", N, M, M)

    best = {"median": None, "tour": None}
    keys = {"median": "improvement", "tour": "tour_cost"}

    random_combs = pick_random_combs(N, k, max_iter, seed=seed)

    for idx, indices in enumerate(random_combs):
        subset = all_points[list(indices)]
        result = evaluate_subset(subset, options, metric, degree)

        if idx % max(1, max_iter // 10) == 0:
            logger.debug(
                "subset %d/%d | improvement %.4f | tour cost %.4f",
                idx, max_iter, result["improvement"], result["tour_cost"],
            )

        for label, key in keys.items():
            if best[label] is None or result[key] > best[label][key]:
                best[label] = result

    if save:
        for label, r in best.items():
            if r is None:
                continue
            r["filename"] = save_result_to_file(
                r["points"],
                r["tour"],
                r["tour_cost"],
                r["center"],
                r["center_score"],
                r["centroid_score"],
                r["coefficients"],
                M,
                k,
                label=f"{label}_{metric}",
                folder=folder,
            )
            logger.info("Saved result for %s: improvement=%.4f tour_cost=%.4f",
                        label, r["improvement"], r["tour_cost"])

    logger.info("Search completed for M=%d, k=%d.", M, k)
    return best


# -------------------------
# RUNNERS
# -------------------------
def run_experiments(grid_sizes=range(4, 17, 4), percents=range(10, 100, 30), max_iter=20, seed=42, folder=None):
    """Example loop over grids and subset sizes; returns {(M, k): results}."""
    summary = {}
    for M in grid_sizes:
        total_points = M * M
        logger.info("Grid %dx%d (%d points)", M, M, total_points)

        for percent in percents:
            k = max(1, (total_points * percent) // 100)
            logger.info("M=%d, k=%d (%d%%), max_iter=%d", M, k, percent, max_iter)
            summary[(M, k)] = find_worst_subset_randomized(
                M, k, max_iter=max_iter, seed=seed, folder=folder,
            )

    return summary


if __name__ == "__main__":
    from .logging_config import setup_logging

    setup_logging()
    run_experiments()
