import numpy as np
import pytest

from sfd_beam.domain.beam import BeamSpec, N_SAMPLES
from sfd_beam.engine.equilibrium import solve_reactions
from sfd_beam.engine.diagrams import (
    sample_diagrams, sample_grid, shear_at, moment_at, shear_step_trace,
)

BEAMS = [
    BeamSpec(L_m=10.0, P_N=100.0, a_m=5.0),
    BeamSpec(L_m=6.0, P_N=30.0, a_m=0.0),
    BeamSpec(L_m=8.0, P_N=40.0, a_m=8.0),
    BeamSpec(L_m=3.7, P_N=12.34, a_m=1.1),
    BeamSpec(L_m=250.0, P_N=5e4, a_m=180.0),
]


def _run(spec):
    r = solve_reactions(spec)
    grid, series = sample_diagrams(spec, r)
    return r, grid, series


@pytest.mark.parametrize("spec", BEAMS)
def test_grid_shape(spec):
    grid = sample_grid(spec)
    assert len(grid) == N_SAMPLES == 100
    assert grid.x[0] == 0.0
    assert grid.x[-1] == spec.L_m
    assert np.allclose(np.diff(grid.x), spec.L_m / 99)
    assert grid.step == pytest.approx(spec.L_m / 99)
    assert np.allclose(grid.x, (spec.L_m / 99) * np.arange(100))


@pytest.mark.parametrize("spec", BEAMS)
def test_series_aligned_with_grid(spec):
    _, grid, series = _run(spec)
    assert series.V.shape == grid.x.shape
    assert series.M.shape == grid.x.shape


@pytest.mark.parametrize("spec", BEAMS)
def test_shear_splits_at_load(spec):
    r, grid, series = _run(spec)
    for x, V in zip(grid.x, series.V):
        if x < spec.a_m:
            assert V == r.Ra_N
        else:
            assert V == r.Ra_N - spec.P_N


@pytest.mark.parametrize("spec", BEAMS)
def test_moment_is_zero_at_supports(spec):
    _, _, series = _run(spec)
    scale = spec.P_N * spec.L_m
    assert series.M[0] == pytest.approx(0.0, abs=1e-12 * scale)
    assert series.M[-1] == pytest.approx(0.0, abs=1e-12 * scale)


def test_series_are_read_only():
    _, grid, series = _run(BEAMS[0])
    with pytest.raises(ValueError):
        series.V[0] = 1.0
    with pytest.raises(ValueError):
        grid.x[0] = 1.0


def test_point_evaluators_midspan():
    spec = BeamSpec(L_m=10.0, P_N=100.0, a_m=5.0)
    r = solve_reactions(spec)
    assert shear_at(spec, r, 4.999) == pytest.approx(50.0)
    assert shear_at(spec, r, 5.0) == pytest.approx(-50.0)
    assert moment_at(spec, r, 5.0) == pytest.approx(250.0)
    assert moment_at(spec, r, 2.5) == pytest.approx(125.0)
    assert moment_at(spec, r, 10.0) == pytest.approx(0.0, abs=1e-9)


def test_no_sample_lands_on_midspan_load():
    spec = BeamSpec(L_m=10.0, P_N=100.0, a_m=5.0)
    _, grid, series = _run(spec)
    assert not np.any(grid.x == 5.0)
    # el pico muestreado queda por debajo del pico analítico M(5)=250
    assert float(np.max(series.M)) == pytest.approx(247.4747, abs=1e-4)


def test_shear_step_trace_inserts_jump():
    spec = BeamSpec(L_m=10.0, P_N=100.0, a_m=5.0)
    r, grid, series = _run(spec)
    x, V = shear_step_trace(spec, r, grid)

    assert len(x) == len(grid) + 2
    at_a = np.nonzero(x == 5.0)[0]
    assert len(at_a) == 2
    assert V[at_a[0]] == pytest.approx(50.0)
    assert V[at_a[1]] == pytest.approx(-50.0)
    assert np.all(np.diff(x) >= 0.0)
    # la serie original no cambia
    assert len(series.V) == 100


def test_shear_step_trace_load_at_left_support():
    spec = BeamSpec(L_m=6.0, P_N=30.0, a_m=0.0)
    r, grid, _ = _run(spec)
    x, V = shear_step_trace(spec, r, grid)
    assert x[0] == 0.0 and x[1] == 0.0
    assert V[0] == pytest.approx(30.0)
    assert np.allclose(V[1:], 0.0)


def test_invalid_spec_raises():
    bad = BeamSpec(L_m=10.0, P_N=100.0, a_m=11.0)
    r = solve_reactions(BeamSpec(L_m=10.0, P_N=100.0, a_m=5.0))
    with pytest.raises(ValueError):
        sample_diagrams(bad, r)


def test_sample_grid_needs_two_points():
    with pytest.raises(ValueError):
        sample_grid(BeamSpec(L_m=1.0, P_N=1.0, a_m=0.5), n_points=1)
