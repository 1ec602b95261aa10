# orbdet

A small orbit determination toolkit in pure Python, with no dependencies
beyond the standard library. It collects the building blocks needed to
evaluate the equations of motion of an Earth satellite and to run Kalman
filter steps around them.

## Modules

- `orbdet.matrix`: a dense `Matrix` of floats with 1-based indexing
  (`m[i, j]`, or `m[n]` in row-major order). It supports `+`, `-`, `*` and
  `/` with matrices and scalars (dividing by a matrix multiplies by its
  inverse), `norm`, `dot`, `cross` (3x1 vectors), `row`, `column`,
  `set_row`, `set_column`, `extract` (a row-major range as a 1xN matrix),
  `inverse` (Gauss-Jordan with partial pivoting), `tolist`, `copy` and
  `Matrix.from_rows`. Helpers: `zeros`, `eye`, `transpose`, `union_vector`.
  A singular matrix raises `SingularMatrixError`; wrong shapes raise
  `ValueError` and bad indices `IndexError`.
- `orbdet.constants`: mathematical, astronomical and physical constants
  (`PI`, `ARCS`, `MJD_J2000`, `R_EARTH`, `GM_EARTH`, `GM_SUN`, ...).
- `orbdet.rotations`: elementary rotations `r_x`, `r_y`, `r_z`, the local
  tangent coordinate matrix `ltc` and the polar motion matrix `pole_matrix`.
- `orbdet.timescales`: `mjday` (Modified Julian Date from a calendar date),
  `mjday_tdb`, `frac`, `timediff` (returning the `TimeDifferences` named
  tuple), `gmst` and `mean_obliquity`.
- `orbdet.nutation`: IAU 1980 nutation angles `nut_angles`, `eqn_equinox`,
  `nut_matrix`, precession `prec_matrix`, `gast` and `gha_matrix`.
- `orbdet.kepler`: `ecc_anom` solves Kepler's equation by Newton's method
  and raises `ConvergenceError` if it does not converge; `sign` returns the
  absolute value of one number with the sign of another.
- `orbdet.geodesy`: `position` (Earth-fixed position from geodetic
  coordinates) and `az_el_pa` (azimuth, elevation and their partials).
- `orbdet.iers`: `iers` reads Earth orientation parameters for a UTC date
  from a 13-row EOP table, with `Interpolation.NONE` or
  `Interpolation.LINEAR`, and returns `EarthOrientation`. A missing day
  raises `MissingEopDataError`.
- `orbdet.ephemeris`: `cheb3d` evaluates a 3D Chebyshev approximation;
  `jpl_eph_de430` computes geocentric positions of the planets, Moon and Sun
  from a table of DE430 coefficients and returns `BodyPositions`. An epoch
  outside the table raises `EphemerisRangeError`.
- `orbdet.kalman`: `measurement_update` (scalar measurement, returning gain,
  state and covariance) and `time_update`.
- `orbdet.gravity`: normalised Legendre functions `legendre`, the harmonic
  acceleration `accel_harmonic`, its gradient `g_accel_harmonic` (central
  differences with a 1 m step) and the point-mass perturbation
  `accel_point_mass`.
- `orbdet.data`: `load_eop`, `load_gravity_field` and `load_de430` read
  whitespace-separated text tables; `AuxParams`, `default_aux_params()` and
  `ForceModel` bundle the tables and run parameters.
- `orbdet.dynamics`: `accel` (derivative of a 6-element state) and
  `var_eqn` (derivative of state plus 6x6 transition matrix, 42 elements).

## Example

```python
from orbdet.timescales import mjday, gmst
from orbdet.nutation import gha_matrix

mjd = mjday(2000, 1, 1, 12, 0, 0.0)
print(gmst(mjd))
print(gha_matrix(mjd))
```

```python
from orbdet.matrix import Matrix

a = Matrix.from_rows([[1, 2, 3], [0, 1, 4], [5, 6, 0]])
print(a.inverse())
print(a[2, 3], a[6])  # both 4.0
```

## Force model

`accel` and `var_eqn` need external data: an Earth orientation table, a
gravity field (such as GGM03S) and DE430 Chebyshev coefficients. Read them
with `load_eop(path, count)`, `load_gravity_field(path, n)` and
`load_de430(path, rows, cols)`, and combine them into a `ForceModel`:

```python
from orbdet.data import ForceModel, default_aux_params, load_de430, load_eop, load_gravity_field
from orbdet.dynamics import accel

eop = load_eop("eop.txt", 21413)
cnm, snm = load_gravity_field("gravity.txt", 181)
pc = load_de430("de430.txt", 2285, 1020)
model = ForceModel(eop=eop, cnm=cnm, snm=snm, pc=pc, aux=default_aux_params())
```

The gravity matrices must be at least `(n + 1) x (m + 1)` for the degree
`n` and order `m` set in `AuxParams`.

## What it does not do

- No data files are included; the tables above must be supplied.
- There is no numerical integrator or orbit propagator: `accel` and
  `var_eqn` return derivatives to pass to an integrator of your choice.
- There is no command-line program; the package is used as a library.

## Tests

Install the package with its `test` extra and run the suite with pytest.