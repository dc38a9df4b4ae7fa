# path: src/sfd_beam/engine/analyzer.py
from __future__ import annotations

import logging
from typing import Optional

from sfd_beam.domain.results import AnalysisOk, AnalysisErr, AnalysisResult
from sfd_beam.engine.validate import InvalidInput, parse_inputs
from sfd_beam.engine.equilibrium import solve_reactions
from sfd_beam.engine.diagrams import sample_diagrams
from sfd_beam.engine.summary import summarize

logger = logging.getLogger(__name__)


def compute(
    length_text: Optional[str],
    load_text: Optional[str],
    position_text: Optional[str],
) -> AnalysisResult:
    """
    Cálculo completo: validar -> reacciones -> muestreo -> máximos.

    Todo o nada: una entrada inválida devuelve AnalysisErr (no lanza).
    """
    logger.debug("Cálculo solicitado: L=%r P=%r a=%r", length_text, load_text, position_text)

    try:
        spec = parse_inputs(length_text, load_text, position_text)
    except InvalidInput as e:
        logger.info("Entrada rechazada: L=%r P=%r a=%r", length_text, load_text, position_text)
        return AnalysisErr(message=e.message)

    reactions = solve_reactions(spec)
    grid, series = sample_diagrams(spec, reactions)
    summary = summarize(series)

    logger.debug(
        "Ra=%g Rb=%g | max|V|=%s max|M|=%s",
        reactions.Ra_N, reactions.Rb_N, summary.max_shear_text, summary.max_moment_text,
    )

    return AnalysisOk(
        spec=spec,
        reactions=reactions,
        grid=grid,
        series=series,
        summary=summary,
    )
