class PlanarToolkitError(Exception):
    """Base class for every error raised by planar_toolkit."""


class InvalidInput(PlanarToolkitError, ValueError):
    """Raised when a solver receives arguments it cannot work with."""


class NumericalInstability(PlanarToolkitError, ArithmeticError):
    """Raised when the normal-equations system is singular or near-singular."""
