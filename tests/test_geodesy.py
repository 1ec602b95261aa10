import math

import pytest

from orbdet.geodesy import az_el_pa, position
from orbdet.matrix import Matrix


def test_position_on_equator():
    assert list(position(0.0, 0.0, 0.0)) == pytest.approx([6378136.3, 0.0, 0.0], abs=1e-10)


def test_position_shape():
    assert position(0.4, 0.3, 100.0).shape == (1, 3)


def test_position_north_pole_polar_radius():
    r = position(0.0, math.pi / 2, 0.0)
    polar = 6378136.3 * (1 - 1 / 298.257223563)
    assert r[1, 3] == pytest.approx(polar, rel=1e-12)
    assert abs(r[1, 1]) < 1e-6


def test_position_height_adds_radially_on_equator():
    r = position(math.pi / 2, 0.0, 1000.0)
    assert r[1, 2] == pytest.approx(6378136.3 + 1000.0)


def test_az_el_pa():
    s = Matrix.from_rows([[1, 2, 3]])
    az, el, d_ads, d_eds = az_el_pa(s)
    assert az == pytest.approx(0.463647609000806, abs=1e-10)
    assert el == pytest.approx(0.930274014115472, abs=1e-10)
    assert list(d_ads) == pytest.approx([0.4, -0.2, 0.0], abs=1e-10)
    assert list(d_eds) == pytest.approx(
        [-0.095831484749991, -0.191662969499982, 0.159719141249985], abs=1e-10
    )


def test_az_el_pa_negative_azimuth_wraps():
    az, el, _, _ = az_el_pa(Matrix.from_rows([[-1, -1, 0]]))
    assert az == pytest.approx(5 * math.pi / 4)
    assert el == pytest.approx(0.0)