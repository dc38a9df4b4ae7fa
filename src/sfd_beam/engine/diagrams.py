from __future__ import annotations

from typing import Tuple

import numpy as np

from sfd_beam.domain.beam import BeamSpec, N_SAMPLES
from sfd_beam.domain.results import Reactions, SampleGrid, DiagramSeries


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr = np.asarray(arr, dtype=float)
    arr.setflags(write=False)
    return arr


# -------------------------
# Evaluadores vectorizados
# -------------------------
def _eval_V_array(spec: BeamSpec, reactions: Reactions, x: np.ndarray) -> np.ndarray:
    # V = Ra antes de la carga, Ra - P desde x=a (inclusive)
    Ra = float(reactions.Ra_N)
    return np.where(x < spec.a_m, Ra, Ra - spec.P_N).astype(float)


def _eval_M_array(spec: BeamSpec, reactions: Reactions, x: np.ndarray) -> np.ndarray:
    Ra = float(reactions.Ra_N)
    return np.where(x < spec.a_m, Ra * x, Ra * x - spec.P_N * (x - spec.a_m)).astype(float)


def shear_at(spec: BeamSpec, reactions: Reactions, x: float) -> float:
    return float(_eval_V_array(spec, reactions, np.asarray([x], dtype=float))[0])


def moment_at(spec: BeamSpec, reactions: Reactions, x: float) -> float:
    return float(_eval_M_array(spec, reactions, np.asarray([x], dtype=float))[0])


def sample_grid(spec: BeamSpec, n_points: int = N_SAMPLES) -> SampleGrid:
    """x_i = (L/(n-1))·i, con el último punto exactamente en L."""
    if spec.L_m <= 0:
        raise ValueError(f"Luz inválida: L={spec.L_m:g}")
    if n_points < 2:
        raise ValueError(f"Se necesitan al menos 2 puntos (n_points={n_points})")
    return SampleGrid(x=_frozen(np.linspace(0.0, float(spec.L_m), int(n_points))))


def sample_diagrams(
    spec: BeamSpec,
    reactions: Reactions,
    n_points: int = N_SAMPLES,
) -> Tuple[SampleGrid, DiagramSeries]:
    """
    Muestreo uniforme de V(x) y M(x) sobre [0, L].

    Sin refinamiento en x=a: el salto de corte queda del lado en que cae
    cada muestra (ver shear_step_trace para dibujar el salto exacto).
    """
    if not spec.is_valid():
        raise ValueError(f"BeamSpec inválido: {spec}")

    grid = sample_grid(spec, n_points)
    V = _eval_V_array(spec, reactions, grid.x)
    M = _eval_M_array(spec, reactions, grid.x)
    return grid, DiagramSeries(V=_frozen(V), M=_frozen(M))


def shear_step_trace(
    spec: BeamSpec,
    reactions: Reactions,
    grid: SampleGrid,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Devuelve (x, V) para graficar con el salto vertical exacto en x=a:
    se insertan dos puntos en a (valor izquierdo Ra y derecho Ra - P).
    No modifica la serie muestreada.
    """
    x = np.asarray(grid.x, dtype=float)
    a = float(spec.a_m)
    Ra = float(reactions.Ra_N)

    left = x[x < a]
    right = x[x >= a]

    x_out = np.concatenate([left, [a, a], right])
    V_out = np.concatenate([
        np.full(left.shape, Ra),
        [Ra, Ra - spec.P_N],
        np.full(right.shape, Ra - spec.P_N),
    ])
    return x_out, V_out.astype(float)
