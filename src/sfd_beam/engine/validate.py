from __future__ import annotations

import math
from typing import Optional

from sfd_beam.domain.beam import BeamSpec, INVALID_INPUT_MESSAGE


class InvalidInput(ValueError):
    """Entrada inválida. Todas las causas comparten el mismo mensaje."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
        self.message = message


def _try_float(s: Optional[str]) -> Optional[float]:
    t = (s or "").strip().replace(",", ".")
    if t == "":
        return None
    try:
        v = float(t)
    except ValueError:
        return None
    if not math.isfinite(v):
        return None
    return v


def parse_inputs(length_text: Optional[str], load_text: Optional[str], position_text: Optional[str]) -> BeamSpec:
    """
    Convierte los tres textos del formulario en un BeamSpec válido.

    Rechaza (InvalidInput):
      - texto vacío o no numérico (también nan / inf)
      - L <= 0, P <= 0
      - a < 0 o a > L  (a == 0 y a == L son válidos)
    """
    L = _try_float(length_text)
    P = _try_float(load_text)
    a = _try_float(position_text)

    if L is None or P is None or a is None:
        raise InvalidInput()

    spec = BeamSpec(L_m=L, P_N=P, a_m=a)
    if not spec.is_valid():
        raise InvalidInput()
    return spec
