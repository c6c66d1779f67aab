"""
Configuration & Defaults
========================
Central registry for the default solver parameters and the folder used to
store experiment results.

Exports:
    DEFAULT_EPSILON (float): Step size at which the median search stops.
    DEFAULT_BOUNDS (float): Initial step, relative to the mean point cost.
    DEFAULT_SUBSEARCH (bool): Whether the median search also steps diagonally.
    DEFAULT_DEGREE (int): Baseline degree used by the polynomial degree guess.
    PIVOT_TOLERANCE (float): Relative threshold below which a pivot is singular.
"""
import os
from pathlib import Path


# Geometric median search
DEFAULT_EPSILON: float = 1e-3
DEFAULT_BOUNDS: float = 10.0
DEFAULT_SUBSEARCH: bool = False

# Polynomial fitting
DEFAULT_DEGREE: int = 2
PIVOT_TOLERANCE: float = 1e-12


def get_results_path() -> str:
    """
    Folder where experiment results are written.
    The PLANAR_TOOLKIT_RESULTS environment variable wins over the default,
    which is a ``results`` folder in the current working directory.
    """
    override = os.environ.get("PLANAR_TOOLKIT_RESULTS")
    if override:
        return str(Path(override).expanduser().resolve())
    return str(Path.cwd() / "results")


