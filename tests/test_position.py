import pytest

from planar_toolkit.center import GeometricSearchOptions
from planar_toolkit.errors import InvalidInput
from planar_toolkit.position import Position


def test_instantiation(four_points):
    pos = Position(four_points[:3])
    assert pos.locations == [[1.0, 2.0], [5.0, 6.6], [-7.0, 8.1]]
    assert pos.options.epsilon == 1e-3
    assert pos.options.bounds == 10
    assert pos.options.subsearch is False


def test_add_remove_adjust():
    pos = Position([[1, 2]])
    pos.add([5, 3])
    assert pos.locations == [[1.0, 2.0], [5.0, 3.0]]

    assert pos.remove([5, 3]) == [5, 3]
    assert pos.locations == [[1.0, 2.0]]
    assert pos.remove([5, 3]) == -1

    pos.add([5, 3])
    assert pos.adjust([5, 3], [3, 5]) == [5, 3]
    assert pos.locations == [[1.0, 2.0], [3.0, 5.0]]
    assert pos.adjust([9, 9], [0, 0]) == -1
    assert len(pos) == 2


def test_add_rejects_bad_location():
    with pytest.raises(InvalidInput):
        Position([[1, 2]]).add([1, 2, 3])


def test_centers(four_points):
    pos = Position(four_points)
    assert pos.median == pytest.approx([0.525, 3.75])
    assert pos.center == pytest.approx([1.0, 2.0], abs=2e-3)
    assert pos.score == pytest.approx(0.06535988277952172, abs=1e-4)


def test_oblique_search_option(four_points):
    pos = Position(four_points, GeometricSearchOptions(subsearch=True))
    assert pos.center == pytest.approx([1.0, 2.0], abs=2e-3)


def test_costs():
    pos = Position([[0, 0], [0, 1], [1, 0]])
    assert pos.median_cost == pytest.approx(1.9621165057908914)
    assert pos.center_cost == pytest.approx(1.9318516525781366, abs=1e-5)
    assert pos.center_cost < pos.median_cost


def test_paths(eleven_points):
    pos = Position(eleven_points)
    assert pos.path == [0, 2, 7, 1, 5, 4, 9, 3, 6, 8, 10]
    assert pos.naive_drive == [0, 2, 7, 1, 5, 4, 9, 3, 6, 8, 10]


def test_polynomial(four_points):
    pos = Position(four_points)
    assert pos.polynomial == pytest.approx([6.405511, -4.836808, 0.295336, 0.135961], abs=1e-5)


def test_values_follow_mutations():
    pos = Position([[0, 0], [2, 0]])
    assert pos.median == pytest.approx([1.0, 0.0])
    pos.add([4, 0])
    assert pos.median == pytest.approx([2.0, 0.0])


def test_single_location_score_is_zero():
    assert Position([[3, 3]]).score == 0.0


def test_empty_position_has_no_center():
    with pytest.raises(InvalidInput):
        Position([]).center
