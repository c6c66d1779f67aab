import logging

import numpy as np

from .center import GeometricSearchOptions, geometric_median, mass_center
from .geometry import as_points
from .heuristics import nearest_neighbor_tour
from .polynomial import polynomial_fit

logger = logging.getLogger(__name__)


class Position:
    """
    A caller-owned set of locations on a plane.

    Every derived value (centers, costs, tours, fitted polynomial) is
    recomputed from the current locations on access; nothing is cached.

    ```
    pos = Position([[1, 2], [5, 6.6], [-7, 8.1]])
    pos.add([3.1, -1.7])
    pos.center   # geometric median
    pos.median   # center of mass
    ```
    """

    def __init__(self, locations, options: GeometricSearchOptions = None):
        self.locations = [self._as_location(loc) for loc in locations]
        self.options = options if options is not None else GeometricSearchOptions()

    @staticmethod
    def _as_location(location):
        pt = as_points([location])[0]
        return [float(pt[0]), float(pt[1])]

    def _find(self, location) -> int:
        target = self._as_location(location)
        for i, loc in enumerate(self.locations):
            if loc[0] == target[0] and loc[1] == target[1]:
                return i
        return -1

    # -------------------------
    # MANIPULATION
    # -------------------------
    def add(self, location):
        """Append a location to the set."""
        self.locations.append(self._as_location(location))
        logger.debug("Added location %s (%d total)", location, len(self.locations))

    def remove(self, location):
        """Remove the first matching location; returns it, or -1 if absent."""
        i = self._find(location)
        if i == -1:
            return -1
        del self.locations[i]
        logger.debug("Removed location %s", location)
        return location

    def adjust(self, location, replacement):
        """Replace the first matching location; returns the old one, or -1 if absent."""
        i = self._find(location)
        if i == -1:
            return -1
        self.locations[i] = self._as_location(replacement)
        logger.debug("Moved location %s -> %s", location, replacement)
        return location

    # -------------------------
    # CENTERS
    # -------------------------
    @property
    def center(self) -> np.ndarray:
        """Geometric median of the locations."""
        return geometric_median(self.locations, self.options)[0]

    @property
    def median(self) -> np.ndarray:
        """Center of mass of the locations, a rough estimate of `center`."""
        return mass_center(self.locations)[0]

    @property
    def center_cost(self) -> float:
        return geometric_median(self.locations, self.options)[1]

    @property
    def median_cost(self) -> float:
        return mass_center(self.locations)[1]

    @property
    def score(self) -> float:
        """Relative cost improvement of `center` over `median`."""
        median_cost = self.median_cost
        if median_cost == 0:
            return 0.0
        return (median_cost - self.center_cost) / median_cost

    # -------------------------
    # PATHS / CURVES
    # -------------------------
    @property
    def path(self) -> list:
        """Euclidean nearest-neighbor tour starting at the first location."""
        return nearest_neighbor_tour(self.locations, 0, "euclidean")

    @property
    def naive_drive(self) -> list:
        """Manhattan nearest-neighbor tour starting at the first location."""
        return nearest_neighbor_tour(self.locations, 0, "manhattan")

    @property
    def polynomial(self) -> np.ndarray:
        """Least-squares polynomial through the locations, degree guessed."""
        return polynomial_fit(self.locations)

    def __len__(self):
        return len(self.locations)

    def __repr__(self):
        return f"Position({self.locations!r})"
