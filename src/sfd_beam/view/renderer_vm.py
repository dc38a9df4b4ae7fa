from __future__ import annotations

from typing import Optional, Protocol

import numpy as np

from sfd_beam.domain.beam import BeamSpec
from sfd_beam.domain.results import DiagramSeries, SampleGrid, Reactions
from sfd_beam.engine.diagrams import shear_step_trace
from sfd_beam.view.style import ChartStyle


class DiagramRenderer(Protocol):
    def render(self, series: DiagramSeries, grid: SampleGrid) -> None: ...

    def clear(self) -> None: ...


# -------------------------
# Helpers formato
# -------------------------
def _fmt_plain(v: float, decimals: int = 2) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _annotate_abs_max(ax, x: np.ndarray, y: np.ndarray, *, color: str, unit: str, style: ChartStyle):
    """
    Marca la muestra de máximo |y|. No marca nada si la serie es nula.
    """
    if len(y) == 0:
        return
    i = int(np.argmax(np.abs(y)))
    yi = float(y[i])
    if abs(yi) < 1e-12:
        return

    xi = float(x[i])
    ax.scatter([xi], [yi], s=style.marker_size, color=color, zorder=6)
    ax.annotate(
        f"{_fmt_plain(yi, 2)} {unit}",
        xy=(xi, yi),
        xytext=(0, 8 if yi >= 0 else -8),
        textcoords="offset points",
        ha="center",
        va="bottom" if yi >= 0 else "top",
        fontsize=style.font_size,
        color=color,
        zorder=7,
    )


# -------------------------
# Render
# -------------------------
def render_diagrams(
    ax,
    grid: SampleGrid,
    series: DiagramSeries,
    *,
    style: Optional[ChartStyle] = None,
    spec: Optional[BeamSpec] = None,
    reactions: Optional[Reactions] = None,
):
    """
    Un único gráfico con V(x) y M(x) superpuestos (rellenos hasta cero).
    """
    style = style or ChartStyle()
    ax.clear()

    x = np.asarray(grid.x, dtype=float)
    V = np.asarray(series.V, dtype=float)
    M = np.asarray(series.M, dtype=float)

    xV, yV = x, V
    if style.exact_step and spec is not None and reactions is not None:
        xV, yV = shear_step_trace(spec, reactions, grid)

    ax.plot(xV, yV, color=style.shear_color, linewidth=style.line_lw, label=style.shear_label)
    ax.fill_between(xV, yV, 0.0, color=style.shear_color, alpha=style.fill_alpha)

    ax.plot(x, M, color=style.moment_color, linewidth=style.line_lw, label=style.moment_label)
    ax.fill_between(x, M, 0.0, color=style.moment_color, alpha=style.fill_alpha)

    ax.axhline(0.0, linewidth=1.0, color="black")
    if len(x):
        ax.set_xlim(float(x[0]), float(x[-1]))

    _annotate_abs_max(ax, x, V, color=style.shear_color, unit="N", style=style)
    _annotate_abs_max(ax, x, M, color=style.moment_color, unit="Nm", style=style)

    title_font = {"size": style.title_font_size, "weight": style.title_font_weight}
    ax.set_xlabel(style.x_title, fontdict=title_font)
    ax.set_ylabel(style.y_title, fontdict=title_font)
    ax.legend(loc="best")
    ax.grid(True, alpha=0.25)


class AxesRenderer:
    """Adaptador DiagramRenderer sobre un Axes de matplotlib."""

    def __init__(self, ax, style: Optional[ChartStyle] = None):
        self.ax = ax
        self.style = style or ChartStyle()

    def render(
        self,
        series: DiagramSeries,
        grid: SampleGrid,
        spec: Optional[BeamSpec] = None,
        reactions: Optional[Reactions] = None,
    ) -> None:
        render_diagrams(self.ax, grid, series, style=self.style, spec=spec, reactions=reactions)

    def clear(self) -> None:
        self.ax.clear()
