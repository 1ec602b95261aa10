import pytest

from orbdet.kalman import measurement_update, time_update
from orbdet.matrix import Matrix, SingularMatrixError, eye


def test_time_update_reference_case():
    p = Matrix.from_rows([[1, 2], [3, 4]])
    phi = Matrix.from_rows([[5, 6], [7, 8]])
    result = time_update(p, phi, 0.5)
    expected = [[319.5, 433.5], [431.5, 585.5]]
    for got, want in zip(result.tolist(), expected):
        assert got == pytest.approx(want, abs=1e-10)


def test_time_update_identity_without_noise():
    p = Matrix.from_rows([[2, 1], [1, 3]])
    assert time_update(p, eye(2)) == p


def test_time_update_does_not_modify_input():
    p = Matrix.from_rows([[1, 2], [3, 4]])
    time_update(p, Matrix.from_rows([[5, 6], [7, 8]]), 0.5)
    assert p == Matrix.from_rows([[1, 2], [3, 4]])


def test_measurement_update_reference_case():
    x = Matrix.from_rows([[2.0]])
    p = eye(1)
    g_matrix = Matrix.from_rows([[1.0]])
    k, x_new, p_new = measurement_update(x, 3.0, 2.5, 0.5, g_matrix, p, 1)
    assert k[1, 1] == pytest.approx(0.8, abs=1e-6)
    assert x_new[1, 1] == pytest.approx(2.4, abs=1e-6)
    assert p_new[1, 1] == pytest.approx(0.2, abs=1e-6)


def test_measurement_update_two_states():
    x = Matrix.from_rows([[1.0], [1.0]])
    g_matrix = Matrix.from_rows([[1.0, 0.0]])
    k, x_new, p_new = measurement_update(x, 3.0, 1.0, 1.0, g_matrix, eye(2), 2)
    assert k.shape == (1, 2)
    assert list(k) == pytest.approx([0.5, 0.0])
    assert list(x_new) == pytest.approx([2.0, 1.0])
    assert p_new.tolist()[0] == pytest.approx([0.5, 0.0])
    assert p_new.tolist()[1] == pytest.approx([0.0, 1.0])


def test_measurement_update_reduces_variance():
    p = Matrix.from_rows([[4.0, 1.0], [1.0, 2.0]])
    x = Matrix.from_rows([[0.0], [0.0]])
    g_matrix = Matrix.from_rows([[0.0, 1.0]])
    _, _, p_new = measurement_update(x, 1.0, 0.0, 0.3, g_matrix, p, 2)
    assert p_new[1, 1] < p[1, 1]
    assert p_new[2, 2] < p[2, 2]


def test_measurement_update_singular_innovation_raises():
    x = Matrix.from_rows([[0.0]])
    g_matrix = Matrix.from_rows([[0.0]])
    with pytest.raises(SingularMatrixError):
        measurement_update(x, 1.0, 0.0, 0.0, g_matrix, eye(1), 1)