from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import QLineEdit, QWidget


class NumericLineEdit(QLineEdit):
    """
    Campo numérico para el formulario:
    - Acepta números con punto o coma
    - Permite vacío (la validación real la hace el motor)
    - Sin notación científica
    """
    def __init__(
        self,
        placeholder: str = "",
        parent: Optional[QWidget] = None,
        *,
        decimals: int = 6,
        minv: float = -1e12,
        maxv: float = 1e12,
    ):
        super().__init__(parent)
        self.setPlaceholderText(placeholder)
        self.setAlignment(Qt.AlignCenter)
        self.setClearButtonEnabled(True)

        val = QDoubleValidator(float(minv), float(maxv), int(decimals), self)
        val.setNotation(QDoubleValidator.StandardNotation)  # sin científica
        self.setValidator(val)

    def raw_text(self) -> str:
        return (self.text() or "").strip()
