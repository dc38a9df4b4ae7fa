from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from sfd_beam.domain.beam import BeamSpec, DISPLAY_DECIMALS


@dataclass(frozen=True)
class Reactions:
    Ra_N: float  # apoyo izquierdo (x=0), + arriba
    Rb_N: float  # apoyo derecho (x=L), + arriba


@dataclass(frozen=True)
class SampleGrid:
    x: np.ndarray  # posiciones [m], 0..L

    @property
    def step(self) -> float:
        if len(self.x) < 2:
            return 0.0
        return float(self.x[1] - self.x[0])

    def __len__(self) -> int:
        return len(self.x)


@dataclass(frozen=True)
class DiagramSeries:
    V: np.ndarray  # corte [N], alineado con SampleGrid.x
    M: np.ndarray  # momento flector [N·m]


@dataclass(frozen=True)
class ResultSummary:
    max_shear_N: float
    max_moment_Nm: float

    @property
    def max_shear_text(self) -> str:
        return f"{self.max_shear_N:.{DISPLAY_DECIMALS}f}"

    @property
    def max_moment_text(self) -> str:
        return f"{self.max_moment_Nm:.{DISPLAY_DECIMALS}f}"


@dataclass(frozen=True)
class AnalysisOk:
    """Resultado completo de un cálculo válido (listo para graficar)."""
    spec: BeamSpec
    reactions: Reactions
    grid: SampleGrid
    series: DiagramSeries
    summary: ResultSummary

    @property
    def shear(self) -> np.ndarray:
        return self.series.V

    @property
    def moment(self) -> np.ndarray:
        return self.series.M

    @property
    def max_shear(self) -> str:
        return self.summary.max_shear_text

    @property
    def max_moment(self) -> str:
        return self.summary.max_moment_text


@dataclass(frozen=True)
class AnalysisErr:
    message: str


AnalysisResult = Union[AnalysisOk, AnalysisErr]
