# Re-export convenient entry points for external use

from .errors import (
    PlanarToolkitError,
    InvalidInput,
    NumericalInstability,
)

from .geometry import (
    Metric,
    center_of_mass,
    pairwise_cost_matrix,
    compute_path_cost,
    generate_grid_points,
)

from .center import (
    GeometricSearchOptions,
    geometric_median,
    mass_center,
)

from .polynomial import (
    polynomial_fit,
    guess_polynomial_degree,
    evaluate_polynomial,
)

from .heuristics import (
    nearest_neighbor_tour,
    heuristics_registry_dict,
)

from .position import Position

from .utils import (
    random_points,
    pick_random_combs,
    save_result_to_file,
    load_result_from_file,
)

from .experiment import (
    evaluate_subset,
    find_worst_subset_randomized,
    run_experiments,
)

from .logging_config import setup_logging

__version__ = "0.1.0"
