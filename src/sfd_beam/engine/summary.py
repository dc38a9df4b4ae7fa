from __future__ import annotations

import numpy as np

from sfd_beam.domain.results import DiagramSeries, ResultSummary


def _max_abs(y: np.ndarray) -> float:
    if len(y) == 0:
        return 0.0
    return float(np.max(np.abs(y)))


def summarize(series: DiagramSeries) -> ResultSummary:
    """Máximos absolutos de V y M (precisión completa; el redondeo es solo para mostrar)."""
    return ResultSummary(
        max_shear_N=_max_abs(series.V),
        max_moment_Nm=_max_abs(series.M),
    )
