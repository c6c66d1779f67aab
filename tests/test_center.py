import numpy as np
import pytest

from planar_toolkit.center import GeometricSearchOptions, geometric_median, mass_center
from planar_toolkit.errors import InvalidInput
from planar_toolkit.geometry import cost


def test_single_point_is_its_own_median():
    center, score = geometric_median([(3.5, -2.0)])
    assert center.tolist() == [3.5, -2.0]
    assert score == 0.0


def test_square_converges_to_middle():
    square = [(0, 0), (2, 0), (2, 2), (0, 2)]
    options = GeometricSearchOptions(epsilon=1e-6, bounds=1, subsearch=True)
    center, score = geometric_median(square, options)
    assert center == pytest.approx([1.0, 1.0], abs=1e-6)
    assert score == pytest.approx(4 * np.sqrt(2), abs=1e-9)


@pytest.mark.parametrize("subsearch", [False, True])
def test_score_matches_cost_at_center(four_points, subsearch):
    options = GeometricSearchOptions(epsilon=1e-4, bounds=10, subsearch=subsearch)
    center, score = geometric_median(four_points, options)
    assert score == pytest.approx(cost(four_points, center[0], center[1]))


@pytest.mark.parametrize("subsearch", [False, True])
def test_four_point_median(four_points, subsearch):
    options = GeometricSearchOptions(epsilon=1e-3, bounds=10, subsearch=subsearch)
    center, score = geometric_median(four_points, options)
    assert center == pytest.approx([1.0, 2.0], abs=2e-3)
    assert score == pytest.approx(20.41098713341468, abs=1e-3)
    assert score <= mass_center(four_points)[1]


def test_fermat_point_of_right_triangle():
    center, score = geometric_median([(0, 0), (0, 1), (1, 0)])
    # sqrt((a^2 + b^2 + c^2) / 2 + 2 * sqrt(3) * area)
    assert score == pytest.approx(np.sqrt(2 + np.sqrt(3)), abs=1e-5)


def test_mass_center(four_points):
    center, score = mass_center(four_points)
    assert center == pytest.approx([0.525, 3.75])
    assert score == pytest.approx(cost(four_points, 0.525, 3.75))


def test_repeat_runs_are_identical(four_points):
    options = GeometricSearchOptions(epsilon=1e-5, bounds=3, subsearch=True)
    first = geometric_median(four_points, options)
    second = geometric_median(four_points, options)
    assert np.array_equal(first[0], second[0])
    assert first[1] == second[1]


def test_input_not_mutated(four_points):
    pts = np.array(four_points, dtype=float)
    before = pts.copy()
    geometric_median(pts)
    assert np.array_equal(pts, before)


@pytest.mark.parametrize("kwargs", [
    {"epsilon": 0},
    {"epsilon": -1e-3},
    {"bounds": 0},
    {"bounds": -2},
    {"epsilon": float("inf")},
    {"bounds": "ten"},
])
def test_invalid_options(kwargs):
    with pytest.raises(InvalidInput):
        GeometricSearchOptions(**kwargs)


def test_empty_points():
    with pytest.raises(InvalidInput):
        geometric_median([])


def test_huge_bounds_overflowing_step():
    with pytest.raises(InvalidInput):
        geometric_median([(0, 0), (10, 0)], GeometricSearchOptions(bounds=1e308))


def test_huge_coordinates_still_converge():
    center, score = geometric_median([(0, 0), (1e200, 0)])
    assert np.all(np.isfinite(center))
    assert 0.0 <= center[0] <= 1e200
    assert center[1] == pytest.approx(0.0, abs=1e190)
    assert score == pytest.approx(1e200)


def test_overflowing_centroid():
    with pytest.raises(InvalidInput):
        geometric_median([(1e308, 0), (1e308, 0)])
