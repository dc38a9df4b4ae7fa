from __future__ import annotations

import logging
import sys

import matplotlib
matplotlib.use("QtAgg")
import matplotlib.pyplot as plt

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton,
    QSizePolicy, QFrame,
)
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas

from sfd_beam.ui.app_state import AppState, EditField, Calculate, Action, reduce
from sfd_beam.ui.numeric_input import NumericLineEdit
from sfd_beam.view.renderer_vm import AxesRenderer
from sfd_beam.view.style import ChartStyle

logger = logging.getLogger(__name__)

PROBLEM_TEXT = (
    "Problem: Analyze the Shear Force Diagram (SFD) and Bending Moment Diagram (BMD) "
    "for a Simply Supported Beam subjected to a Single Point Load."
)


class SfdBmdWindow(QMainWindow):
    """
    Formulario (L, P, a) + gráfico V/M + máximos.
    Todo el estado pasa por AppState/reduce; la vista solo lo refleja.
    """
    def __init__(self, style: ChartStyle = ChartStyle()):
        super().__init__()
        self.setWindowTitle("SFD & BMD Calculator")
        self._state = AppState()

        central = QWidget()
        root = QVBoxLayout(central)
        root.setContentsMargins(20, 20, 20, 20)
        root.setSpacing(10)

        title = QLabel("SFD & BMD Calculator")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 28px; font-weight: bold; color: #333;")
        root.addWidget(title)

        subtitle = QLabel(PROBLEM_TEXT)
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setWordWrap(True)
        subtitle.setStyleSheet("font-size: 16px; font-style: italic; color: #555;")
        root.addWidget(subtitle)

        # ==========================
        # Formulario
        # ==========================
        self.ed_length = NumericLineEdit("Beam Length (m)")
        self.ed_load = NumericLineEdit("Point Load (N)")
        self.ed_position = NumericLineEdit("Load Position (m)")

        for name, ed in (("length", self.ed_length), ("load", self.ed_load), ("position", self.ed_position)):
            ed.textChanged.connect(lambda text, n=name: self.dispatch(EditField(n, text)))
            ed.returnPressed.connect(lambda: self.dispatch(Calculate()))
            root.addWidget(ed)

        self.btn_calc = QPushButton("Calculate SFD & BMD")
        self.btn_calc.setStyleSheet(
            "QPushButton { background-color: #007ACC; color: white; font-size: 18px;"
            " font-weight: bold; padding: 12px; border-radius: 5px; }"
        )
        self.btn_calc.clicked.connect(lambda: self.dispatch(Calculate()))
        root.addWidget(self.btn_calc)

        self.lbl_error = QLabel("")
        self.lbl_error.setAlignment(Qt.AlignCenter)
        self.lbl_error.setStyleSheet("color: red; font-weight: bold; font-size: 16px;")
        root.addWidget(self.lbl_error)

        # ==========================
        # Gráfico + máximos
        # ==========================
        self.result_panel = QFrame()
        rp = QVBoxLayout(self.result_panel)

        rp_title = QLabel("Shear Force & Bending Moment Graphs")
        rp_title.setAlignment(Qt.AlignCenter)
        rp_title.setStyleSheet("font-size: 18px; font-weight: bold; color: #333;")
        rp.addWidget(rp_title)

        self.fig = plt.Figure()
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvas(self.fig)
        self.canvas.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.canvas.setMinimumHeight(450)
        rp.addWidget(self.canvas)
        self.renderer = AxesRenderer(self.ax, style)

        max_title = QLabel("Maximum Readings:")
        max_title.setStyleSheet("font-size: 18px; font-weight: bold;")
        self.lbl_max_v = QLabel("")
        self.lbl_max_v.setStyleSheet("font-size: 18px; color: blue;")
        self.lbl_max_m = QLabel("")
        self.lbl_max_m.setStyleSheet("font-size: 18px; color: red;")
        rp.addWidget(max_title)
        rp.addWidget(self.lbl_max_v)
        rp.addWidget(self.lbl_max_m)

        root.addWidget(self.result_panel, 1)
        self.setCentralWidget(central)
        self.resize(900, 900)

        self._sync_view()

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action):
        prev = self._state
        self._state = reduce(self._state, action)
        if isinstance(action, Calculate):
            logger.info("Cálculo: L=%r P=%r a=%r -> %s",
                        self._state.inputs.length, self._state.inputs.load,
                        self._state.inputs.position, self._state.status)
        if self._state.result is not prev.result:
            self._sync_view()

    def _sync_view(self):
        st = self._state
        self.lbl_error.setText(st.error)
        self.lbl_error.setVisible(bool(st.error))

        ok = st.ok
        if ok is None:
            self.renderer.clear()
            self.lbl_max_v.setText("")
            self.lbl_max_m.setText("")
            self.result_panel.setVisible(False)
            self.canvas.draw_idle()
            return

        self.renderer.render(ok.series, ok.grid, spec=ok.spec, reactions=ok.reactions)
        self.fig.tight_layout()
        self.canvas.draw_idle()
        self.lbl_max_v.setText(f"Maximum Shear Force: <b>{ok.max_shear} N</b>")
        self.lbl_max_m.setText(f"Maximum Bending Moment: <b>{ok.max_moment} Nm</b>")
        self.result_panel.setVisible(True)


def main():
    app = QApplication(sys.argv)
    w = SfdBmdWindow()
    w.show()
    sys.exit(app.exec())
