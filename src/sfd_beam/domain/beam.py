from __future__ import annotations

from dataclasses import dataclass

# Muestreo fijo del diagrama y decimales para mostrar máximos
N_SAMPLES = 100
DISPLAY_DECIMALS = 2

INVALID_INPUT_MESSAGE = "Invalid input! Ensure L > 0, P > 0, and 0 ≤ a ≤ L."


@dataclass(frozen=True)
class BeamSpec:
    """
    Viga simplemente apoyada con una carga puntual.

    - L_m: luz entre apoyos [m]
    - P_N: carga puntual (hacia abajo) [N]
    - a_m: posición de la carga desde el apoyo izquierdo [m]
    """
    L_m: float
    P_N: float
    a_m: float

    def is_valid(self) -> bool:
        return self.L_m > 0 and self.P_N > 0 and 0.0 <= self.a_m <= self.L_m
