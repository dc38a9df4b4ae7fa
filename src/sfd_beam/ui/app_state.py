from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from sfd_beam.domain.results import AnalysisOk, AnalysisErr, AnalysisResult
from sfd_beam.engine.analyzer import compute

FIELDS = ("length", "load", "position")


@dataclass(frozen=True)
class InputsText:
    """Textos tal cual los tipea el usuario (sin parsear)."""
    length: str = ""
    load: str = ""
    position: str = ""


@dataclass(frozen=True)
class EditField:
    field: str  # "length" | "load" | "position"
    text: str


@dataclass(frozen=True)
class Calculate:
    pass


Action = Union[EditField, Calculate]


@dataclass(frozen=True)
class AppState:
    """
    Estado de la ventana.
      - result None            => Idle (sin diagrama, sin error)
      - result AnalysisErr     => Error (sin diagrama, con mensaje)
      - result AnalysisOk      => Result (diagrama + máximos)
    """
    inputs: InputsText = field(default_factory=InputsText)
    result: Optional[AnalysisResult] = None

    @property
    def error(self) -> str:
        if isinstance(self.result, AnalysisErr):
            return self.result.message
        return ""

    @property
    def ok(self) -> Optional[AnalysisOk]:
        if isinstance(self.result, AnalysisOk):
            return self.result
        return None

    @property
    def status(self) -> str:
        if self.result is None:
            return "idle"
        if isinstance(self.result, AnalysisErr):
            return "error"
        return "result"


def reduce(state: AppState, action: Action) -> AppState:
    if isinstance(action, EditField):
        if action.field not in FIELDS:
            raise ValueError(f"Campo desconocido: {action.field!r}")
        inputs = replace(state.inputs, **{action.field: action.text})
        return replace(state, inputs=inputs)

    if isinstance(action, Calculate):
        i = state.inputs
        # Cada cálculo reemplaza por completo el resultado anterior
        return replace(state, result=compute(i.length, i.load, i.position))

    raise TypeError(f"Acción no soportada: {action!r}")
