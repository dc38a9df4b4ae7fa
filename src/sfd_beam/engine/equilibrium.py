from __future__ import annotations

from sfd_beam.domain.beam import BeamSpec
from sfd_beam.domain.results import Reactions


def solve_reactions(spec: BeamSpec) -> Reactions:
    """
    Reacciones de una viga simplemente apoyada con una carga puntual P en x=a.

    Ecuaciones:
      ΣM0 = 0  (respecto al apoyo izquierdo)  =>  Rb = P·a / L
      ΣFy = 0                                =>  Ra = P - Rb
    """
    if not spec.is_valid():
        raise ValueError(f"BeamSpec inválido: {spec}")

    L = float(spec.L_m)
    P = float(spec.P_N)
    a = float(spec.a_m)

    Rb = P * a / L
    Ra = P - Rb
    return Reactions(Ra_N=Ra, Rb_N=Rb)
