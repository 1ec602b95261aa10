import pytest

from orbdet.ephemeris import EphemerisRangeError, cheb3d, jpl_eph_de430
from orbdet.matrix import Matrix

JD_START = 2460000.5
T1 = JD_START - 2400000.5

# (first column, coefficients per component, subintervals)
LAYOUT = {
    "mercury": (3, 14, 4),
    "venus": (171, 10, 2),
    "earth": (231, 13, 2),
    "mars": (309, 11, 1),
    "moon": (441, 13, 8),
    "sun": (753, 11, 2),
}


def _record():
    row = [0.0] * 1020
    row[0] = JD_START
    row[1] = JD_START + 32
    return row


def _set_coeffs(row, body, sub, x, y, z):
    start, n, _ = LAYOUT[body]
    base = start - 1 + 3 * n * sub
    for offset, values in enumerate((x, y, z)):
        for k, value in enumerate(values):
            row[base + offset * n + k] = value


def _set_constant(row, body, xyz):
    _, _, subs = LAYOUT[body]
    for sub in range(subs):
        _set_coeffs(row, body, sub, [xyz[0]], [xyz[1]], [xyz[2]])


def _column(m):
    assert m.shape == (3, 1)
    return list(m)


def test_cheb3d_reference_case():
    result = cheb3d(5, 3, 0, 10, [1, 2, 3], [4, 5, 6], [7, 8, 9])
    assert result.shape == (1, 3)
    assert list(result) == pytest.approx([-2, -2, -2], abs=1e-10)


def test_cheb3d_accepts_matrices():
    cx = Matrix.from_rows([[1, 2, 3]])
    cy = Matrix.from_rows([[4, 5, 6]])
    cz = Matrix.from_rows([[7, 8, 9]])
    assert list(cheb3d(5, 3, 0, 10, cx, cy, cz)) == pytest.approx([-2, -2, -2])


def test_cheb3d_linear_term_at_end_point():
    result = cheb3d(10, 2, 0, 10, [1, 2], [0, 3], [0, -1])
    assert list(result) == pytest.approx([3, 3, -1])


def test_cheb3d_out_of_range_raises():
    with pytest.raises(ValueError):
        cheb3d(11, 3, 0, 10, [1, 2, 3], [4, 5, 6], [7, 8, 9])


def test_positions_are_relative_to_earth():
    row = _record()
    _set_constant(row, "earth", (1, 1, 1))
    _set_constant(row, "sun", (5, 6, 7))
    result = jpl_eph_de430(T1 + 10, Matrix.from_rows([row]))

    assert _column(result.earth) == pytest.approx([1000, 1000, 1000])
    assert _column(result.sun) == pytest.approx([4000, 5000, 6000])
    assert _column(result.mercury) == pytest.approx([-1000, -1000, -1000])
    assert _column(result.moon) == pytest.approx([0, 0, 0])


def test_moon_shifts_earth_towards_barycentre():
    row = _record()
    _set_constant(row, "moon", (1, 2, 3))
    result = jpl_eph_de430(T1 + 3, Matrix.from_rows([row]))

    assert _column(result.moon) == pytest.approx([1000, 2000, 3000])
    shift = [e * (1 + 81.30056907419062) for e in _column(result.earth)]
    assert shift == pytest.approx([-1000, -2000, -3000])


@pytest.mark.parametrize(
    "dt, expected",
    [(4, 1000), (8, 1000), (12, 2000), (20, 3000), (28, 4000), (32, 4000)],
)
def test_subinterval_selection(dt, expected):
    row = _record()
    for sub in range(4):
        _set_coeffs(row, "mercury", sub, [sub + 1], [0], [0])
    result = jpl_eph_de430(T1 + dt, Matrix.from_rows([row]))
    assert _column(result.mercury) == pytest.approx([expected, 0, 0])


def test_chebyshev_evaluation_inside_record():
    row = _record()
    _set_coeffs(row, "mars", 0, [0, 1], [0, 0], [2, 0])
    result = jpl_eph_de430(T1 + 24, Matrix.from_rows([row]))
    assert _column(result.mars) == pytest.approx([500, 0, 2000])


def test_record_is_chosen_by_date():
    first = _record()
    second = _record()
    second[0] = JD_START + 32
    second[1] = JD_START + 64
    _set_constant(first, "sun", (1, 0, 0))
    _set_constant(second, "sun", (2, 0, 0))
    pc = Matrix.from_rows([first, second])
    result = jpl_eph_de430(T1 + 40, pc)
    assert _column(result.sun) == pytest.approx([2000, 0, 0])


def test_epoch_outside_coefficients_raises():
    with pytest.raises(EphemerisRangeError):
        jpl_eph_de430(T1 + 100, Matrix.from_rows([_record()]))