import pytest

from cpkit.numeric import gauss, point_to_line_distance


def test_gauss_solves_system():
    matrix = [[2, 1, 5], [1, 3, 10]]
    rank, rows = gauss(matrix, 2)
    assert rank == 2
    x, y = rows[0][2], rows[1][2]
    assert 2 * x + y == pytest.approx(5)
    assert x + 3 * y == pytest.approx(10)
    assert rows[0][:2] == pytest.approx([1, 0])
    assert rows[1][:2] == pytest.approx([0, 1])


def test_gauss_dependent_rows():
    rank, rows = gauss([[1, 2, 3], [2, 4, 6]], 2)
    assert rank == 1
    assert rows[1] == pytest.approx([0, 0, 0])


def test_gauss_zero_matrix():
    rank, rows = gauss([[0, 0], [0, 0]])
    assert rank == 0
    assert rows == [[0.0, 0.0], [0.0, 0.0]]


def test_gauss_does_not_modify_input():
    matrix = [[2, 1, 5], [1, 3, 10]]
    gauss(matrix, 2)
    assert matrix == [[2, 1, 5], [1, 3, 10]]


def test_gauss_pivot_in_later_column():
    rank, rows = gauss([[0, 2, 4]], 2)
    assert rank == 1
    assert rows[0][1] == pytest.approx(1.0)
    assert rows[0][2] * 2 == pytest.approx(4)


def test_gauss_rejects_wide_pivot_count():
    with pytest.raises(ValueError):
        gauss([[1, 2]], 3)


def test_distance_left_and_right():
    assert point_to_line_distance(0, 1, 2 + 3j) == pytest.approx(3.0)
    assert point_to_line_distance(0, 1, 2 - 3j) == pytest.approx(-3.0)


def test_distance_vertical_line():
    assert point_to_line_distance(0, 1j, 4) == pytest.approx(-4.0)


def test_distance_translation_invariant():
    shift = 7 - 2j
    a, b, c = 1 + 1j, 4 + 5j, -3 + 2j
    assert point_to_line_distance(a + shift, b + shift, c + shift) == pytest.approx(
        point_to_line_distance(a, b, c)
    )


def test_distance_accepts_tuples():
    assert point_to_line_distance((0, 0), (1, 0), (2, 3)) == pytest.approx(
        point_to_line_distance(0, 1, 2 + 3j)
    )


def test_point_on_line_has_zero_distance():
    assert point_to_line_distance(1 + 1j, 3 + 3j, 5 + 5j) == pytest.approx(0.0, abs=1e-12)