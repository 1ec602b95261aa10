"""Loading of Earth orientation, gravity field and ephemeris tables, and run parameters."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from itertools import islice

from .matrix import Matrix, transpose, zeros

__all__ = [
    "AuxParams",
    "ForceModel",
    "load_eop",
    "load_gravity_field",
    "load_de430",
    "default_aux_params",
]

_EOP_FIELDS = 13
_GRAVITY_FIELDS = 6


@dataclass
class AuxParams:
    """Epoch and force model switches for orbit propagation."""

    mjd_utc: float
    mjd_tt: float
    n: int
    m: int
    sun: bool = True
    moon: bool = True
    planets: bool = True


def default_aux_params() -> AuxParams:
    """The reference epoch with a degree and order 20 field and all third bodies."""
    return AuxParams(
        mjd_utc=49746.1163541665,
        mjd_tt=49746.1170623147,
        n=20,
        m=20,
        sun=True,
        moon=True,
        planets=True,
    )


@dataclass
class ForceModel:
    """All tables and parameters the equations of motion depend on."""

    eop: Matrix
    cnm: Matrix
    snm: Matrix
    pc: Matrix
    aux: AuxParams = field(default_factory=default_aux_params)


def _read_numbers(path: str | os.PathLike[str], count: int) -> list[float]:
    """The first ``count`` whitespace-separated numbers of a text file."""
    with open(path, encoding="utf-8") as handle:
        tokens = (float(token) for line in handle for token in line.split())
        values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError(f"{path}: expected {count} numbers, found {len(values)}")
    return values


def _chunks(values: list[float], size: int) -> list[list[float]]:
    return [list(chunk) for chunk in zip(*[iter(values)] * size)]


def load_eop(path: str | os.PathLike[str], count: int) -> Matrix:
    """Read ``count`` daily Earth orientation records as a 13 x count matrix."""
    values = _read_numbers(path, _EOP_FIELDS * count)
    return transpose(Matrix.from_rows(_chunks(values, _EOP_FIELDS)))


def load_gravity_field(path: str | os.PathLike[str], n: int) -> tuple[Matrix, Matrix]:
    """Read normalised gravity coefficients as n x n matrices ``(cnm, snm)``.

    Each record holds degree, order, C, S and two standard deviations, in
    order of increasing degree and, within a degree, increasing order.
    """
    count = n * (n + 1) // 2
    records = _chunks(_read_numbers(path, _GRAVITY_FIELDS * count), _GRAVITY_FIELDS)
    cnm = zeros(n, n)
    snm = zeros(n, n)
    positions = ((i, j) for i in range(1, n + 1) for j in range(1, i + 1))
    for (i, j), record in zip(positions, records):
        cnm[i, j] = record[2]
        snm[i, j] = record[3]
    return cnm, snm


def load_de430(path: str | os.PathLike[str], rows: int, cols: int) -> Matrix:
    """Read a rows x cols table of DE430 Chebyshev coefficients."""
    values = _read_numbers(path, rows * cols)
    return Matrix.from_rows(_chunks(values, cols))