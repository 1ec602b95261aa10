import pytest

from orbdet.data import (
    AuxParams,
    ForceModel,
    default_aux_params,
    load_de430,
    load_eop,
    load_gravity_field,
)
from orbdet.matrix import Matrix

EOP_TEXT = (
    "1995 1 30 49747 0.1 0.2 0.3 0.0015 -0.05 -0.002 0.0001 0.0002 29\n"
    "1995 1 31 49748 0.11 0.21 0.31 0.0016 -0.051 -0.0021 0.00011 0.00021 30\n"
)

GRAVITY_TEXT = (
    "0 0 1.0 0.0 0 0\n"
    "1 0 0.0 0.0 0 0\n"
    "1 1 0.0 0.0 0 0\n"
    "2 0 -4.84e-4 0.0 0 0\n"
    "2 1 0.0 0.0 0 0\n"
    "2 2 2.4e-6 -1.4e-6 0 0\n"
)


def test_load_eop_reads_columns(tmp_path):
    path = tmp_path / "eop.txt"
    path.write_text(EOP_TEXT)
    eop = load_eop(path, 2)
    assert eop.shape == (13, 2)
    assert eop[4, 1] == 49747.0
    assert eop[4, 2] == 49748.0
    assert eop[13, 2] == 30.0
    assert eop[7, 1] == 0.3


def test_load_eop_ignores_line_layout(tmp_path):
    path = tmp_path / "eop.txt"
    path.write_text(EOP_TEXT.replace(" ", "\n"))
    flat = load_eop(path, 2)
    path.write_text(EOP_TEXT)
    assert flat == load_eop(path, 2)


def test_load_eop_reads_only_requested_records(tmp_path):
    path = tmp_path / "eop.txt"
    path.write_text(EOP_TEXT)
    eop = load_eop(path, 1)
    assert eop.shape == (13, 1)
    assert eop[4, 1] == 49747.0


def test_load_eop_short_file(tmp_path):
    path = tmp_path / "eop.txt"
    path.write_text(EOP_TEXT)
    with pytest.raises(ValueError):
        load_eop(path, 3)


def test_load_eop_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_eop(tmp_path / "absent.txt", 1)


def test_load_gravity_field(tmp_path):
    path = tmp_path / "field.txt"
    path.write_text(GRAVITY_TEXT)
    cnm, snm = load_gravity_field(path, 3)
    assert cnm.shape == (3, 3) and snm.shape == (3, 3)
    assert cnm[1, 1] == 1.0
    assert cnm[3, 1] == -4.84e-4
    assert cnm[3, 3] == 2.4e-6
    assert snm[3, 3] == -1.4e-6
    assert cnm[1, 2] == 0.0 and snm[2, 3] == 0.0


def test_load_gravity_field_short_file(tmp_path):
    path = tmp_path / "field.txt"
    path.write_text(GRAVITY_TEXT)
    with pytest.raises(ValueError):
        load_gravity_field(path, 4)


def test_load_de430(tmp_path):
    path = tmp_path / "de430.txt"
    path.write_text("1 2 3\n4 5 6\n")
    pc = load_de430(path, 2, 3)
    assert pc.tolist() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def test_load_de430_rejects_non_numbers(tmp_path):
    path = tmp_path / "de430.txt"
    path.write_text("1 2 x\n")
    with pytest.raises(ValueError):
        load_de430(path, 1, 3)


def test_default_aux_params():
    aux = default_aux_params()
    assert aux.mjd_utc == 49746.1163541665
    assert aux.mjd_tt == 49746.1170623147
    assert (aux.n, aux.m) == (20, 20)
    assert aux.sun and aux.moon and aux.planets


def test_force_model_uses_default_params():
    model = ForceModel(eop=Matrix(13, 1), cnm=Matrix(2), snm=Matrix(2), pc=Matrix(1, 3))
    assert model.aux == default_aux_params()
    assert isinstance(model.aux, AuxParams) and model.aux.n == 20