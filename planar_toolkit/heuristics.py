import numpy as np

from .errors import InvalidInput
from .geometry import as_metric, as_points, pairwise_cost_matrix


# -------------------------
# NEAREST UNVISITED CITY
# -------------------------
def nearest_city(cost_matrix: np.ndarray, city: int, visited) -> int:
    """
    Cheapest unvisited city reachable from `city`, or -1 if none is left.

    A zero cost counts as "no edge", so a point coincident with `city` is
    never picked. Ties go to the lowest index.
    """
    nearest = -1
    min_cost = np.inf

    for new_city, _cost in enumerate(cost_matrix[city]):
        if _cost != 0 and not visited[new_city]:
            if _cost < min_cost:
                min_cost = _cost
                nearest = new_city

    return nearest


# -------------------------
# NEAREST-NEIGHBOR TOUR
# -------------------------
def nearest_neighbor_tour(points, start: int = 0, metric="euclidean") -> list:
    """
    Greedy visiting order over `points`, starting at index `start`.

    Builds the pairwise cost matrix under `metric` ("euclidean" or
    "manhattan") and repeatedly walks to the nearest unvisited point.
    Returns the list of visited indices; the first one is `start` and no
    index repeats.

    Known limitation: a zero cost is treated as a missing edge, so coincident
    points can never be the next hop. When only such points remain the tour
    stops early and is shorter than the point set.
    """
    pts = as_points(points)
    metric = as_metric(metric)

    if isinstance(start, bool) or not isinstance(start, (int, np.integer)):
        raise InvalidInput(f"start must be an integer index, got {start!r}")
    if not 0 <= start < len(pts):
        raise InvalidInput(f"start index {start} out of range for {len(pts)} points")

    cost_matrix = pairwise_cost_matrix(pts, metric)

    visited = np.zeros(len(pts), dtype=bool)
    city = int(start)
    visited[city] = True
    tour = [city]

    while not visited.all():
        nearest = nearest_city(cost_matrix, city, visited)
        if nearest == -1:
            break
        visited[nearest] = True
        tour.append(nearest)
        city = nearest

    return tour


def euclidean_tour(points, start: int = 0):
    """Nearest-neighbor tour under straight-line distance."""
    return nearest_neighbor_tour(points, start, "euclidean")


def manhattan_tour(points, start: int = 0):
    """Nearest-neighbor tour under taxicab distance (naive drive order)."""
    return nearest_neighbor_tour(points, start, "manhattan")


# === Accessible heuristics ===
heuristics_registry_dict = {
    "Euclidean": euclidean_tour,
    "Manhattan": manhattan_tour,
}
