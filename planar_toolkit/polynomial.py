import numpy as np

from .config import DEFAULT_DEGREE, PIVOT_TOLERANCE
from .errors import InvalidInput, NumericalInstability
from .geometry import as_points


# -------------------------
# DEGREE GUESS
# -------------------------
def guess_polynomial_degree(x, y) -> int:
    """
    Guess a polynomial degree for the samples (x, y).

    The y-values are ordered by ascending x (stable, ties keep input order)
    and every change of direction along that sequence counts as one extremum.
    The guess is DEFAULT_DEGREE + extrema, or 0 for fewer than two samples.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if len(x) < 2:
        return 0

    sorted_y = y[np.argsort(x, kind="stable")]

    rising = sorted_y[0] < sorted_y[1]
    extrema = 0
    for i in range(1, len(sorted_y) - 1):
        _rising = sorted_y[i] < sorted_y[i + 1]
        if _rising != rising:
            extrema += 1
            rising = _rising

    return DEFAULT_DEGREE + extrema


# -------------------------
# NORMAL EQUATIONS
# -------------------------
def sigma_x(x, length: int) -> np.ndarray:
    """sigma_x[k] = sum_j x_j^k for k = 0..length-1."""
    x = np.asarray(x, dtype=float)
    return np.array([np.sum(x ** k) for k in range(length)], dtype=float)


def sigma_y(x, y, length: int) -> np.ndarray:
    """sigma_y[k] = sum_j x_j^k * y_j for k = 0..length-1."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    return np.array([np.sum(x ** k * y) for k in range(length)], dtype=float)


def normal_matrix(sx: np.ndarray, sy: np.ndarray, degree: int) -> np.ndarray:
    """
    Augmented normal matrix of shape (degree + 1, degree + 2):
    M[i, j] = sx[i + j] for j <= degree and M[i, degree + 1] = sy[i].
    """
    size = degree + 1
    matrix = np.empty((size, size + 1), dtype=float)
    for i in range(size):
        matrix[i, :size] = sx[i:i + size]
        matrix[i, size] = sy[i]
    return matrix


def eliminate(matrix: np.ndarray, tolerance: float = PIVOT_TOLERANCE) -> np.ndarray:
    """
    Gaussian elimination with partial pivoting on an augmented matrix.

    For each pivot row i and each row k below it, row k is swapped into the
    pivot position when |M[k, i]| > |M[i, i]|, then M[k, i] is eliminated.
    Returns a new upper-triangular matrix; the input is left untouched.

    Raises NumericalInstability when a pivot is zero or its magnitude is not
    above ``tolerance`` times the largest coefficient of the system.
    """
    m = np.array(matrix, dtype=float)
    size = m.shape[0]
    limit = tolerance * float(np.max(np.abs(m[:, :size]), initial=0.0))

    for i in range(size):
        for k in range(i + 1, size):
            if abs(m[k, i]) > abs(m[i, i]):
                m[[i, k]] = m[[k, i]]

            if m[k, i] == 0:
                continue
            t = m[k, i] / m[i, i]
            m[k] -= t * m[i]

        pivot = m[i, i]
        if pivot == 0 or abs(pivot) <= limit:
            raise NumericalInstability(
                f"singular normal equations: pivot {i} is {pivot!r} "
                f"(fewer distinct x values than coefficients?)"
            )

    return m


def back_substitute(matrix: np.ndarray) -> np.ndarray:
    """Solve an upper-triangular augmented system from the last row up."""
    size = matrix.shape[0]
    coefficients = np.zeros(size, dtype=float)

    for i in range(size - 1, -1, -1):
        value = matrix[i, size]
        for j in range(i + 1, size):
            value -= matrix[i, j] * coefficients[j]
        coefficients[i] = value / matrix[i, i]

    return coefficients


# -------------------------
# FIT / EVALUATE
# -------------------------
def polynomial_fit(points, degree=None) -> np.ndarray:
    """
    Least-squares polynomial through (x, y) samples.

    Parameters
    ----------
    points : array-like of shape (N, 2)
        Samples (x, y), N >= 1.
    degree : int, optional
        Polynomial degree. None or 0 guesses it with guess_polynomial_degree.

    Returns
    -------
    coefficients : np.ndarray of shape (degree + 1,)
        coefficients[k] multiplies x^k.

    Raises
    ------
    InvalidInput
        Empty or malformed points, negative or non-integer degree.
    NumericalInstability
        The normal equations are singular, e.g. fewer distinct x values
        than degree + 1.
    """
    pts = as_points(points)
    x, y = pts[:, 0], pts[:, 1]

    if degree is not None:
        if isinstance(degree, bool) or not isinstance(degree, (int, np.integer)):
            raise InvalidInput(f"degree must be a non-negative integer, got {degree!r}")
        if degree < 0:
            raise InvalidInput(f"degree must be a non-negative integer, got {degree}")
    if not degree:
        degree = guess_polynomial_degree(x, y)
    degree = int(degree)

    sx = sigma_x(x, 2 * degree + 1)
    sy = sigma_y(x, y, degree + 1)

    triangular = eliminate(normal_matrix(sx, sy, degree))
    return back_substitute(triangular)


def evaluate_polynomial(coefficients, x):
    """Evaluate sum_k coefficients[k] * x^k (Horner scheme); x may be an array."""
    x = np.asarray(x, dtype=float)
    result = np.zeros_like(x)
    for c in reversed(list(coefficients)):
        result = result * x + c
    return result if result.ndim else float(result)
