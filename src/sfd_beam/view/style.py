from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class ChartStyle:
    shear_color: str = "blue"
    moment_color: str = "red"
    line_lw: float = 3.0
    fill_alpha: float = 0.3

    shear_label: str = "Shear Force (N)"
    moment_label: str = "Bending Moment (Nm)"

    x_title: str = "Beam Length (m)"
    y_title: str = "Force (N) / Moment (Nm)"
    title_font_size: int = 16
    title_font_weight: str = "bold"

    marker_size: float = 24.0
    font_size: int = 9

    # Salto de corte con puntos explícitos en a⁻ / a⁺ (solo dibujo)
    exact_step: bool = False
