import pytest

from orbdet.timescales import (
    TimeDifferences,
    frac,
    gmst,
    mean_obliquity,
    mjday,
    mjday_tdb,
    timediff,
)


def test_mjday_j2000_midnight():
    assert mjday(2000, 1, 1, 0, 0, 0) == pytest.approx(51544.0, abs=1e-10)


def test_mjday_defaults_to_midnight():
    assert mjday(2000, 1, 1) == pytest.approx(51544.0, abs=1e-10)


def test_mjday_noon_is_half_day_later():
    assert mjday(2000, 1, 1, 12) == pytest.approx(51544.5, abs=1e-10)


def test_mjday_consecutive_days():
    assert mjday(1999, 12, 31) == pytest.approx(51543.0, abs=1e-10)


def test_mjday_tdb():
    assert mjday_tdb(2000) == pytest.approx(2000.00000001537, abs=1e-10)


def test_frac():
    assert frac(10.7) == pytest.approx(0.7, abs=1e-10)


def test_frac_negative_is_non_negative():
    assert frac(-0.25) == pytest.approx(0.75)


def test_timediff():
    result = timediff(1, 2)
    assert result.ut1_tai == pytest.approx(-1, abs=1e-10)
    assert result.utc_gps == pytest.approx(17, abs=1e-10)
    assert result.ut1_gps == pytest.approx(18, abs=1e-10)
    assert result.tt_utc == pytest.approx(34.184, abs=1e-10)
    assert result.gps_utc == pytest.approx(-17, abs=1e-10)


def test_timediff_unpacks_in_order():
    ut1_tai, utc_gps, ut1_gps, tt_utc, gps_utc = timediff(1, 2)
    assert (ut1_tai, utc_gps, ut1_gps, gps_utc) == pytest.approx((-1, 17, 18, -17))
    assert tt_utc == pytest.approx(34.184)
    assert timediff(1, 2) == TimeDifferences(-1.0, 17.0, 18.0, 34.184, -17.0)


def test_gmst():
    assert gmst(2) == pytest.approx(1.00761373073367, abs=1e-10)


def test_mean_obliquity():
    assert mean_obliquity(51544.5) == pytest.approx(0.4090928042, abs=1e-10)