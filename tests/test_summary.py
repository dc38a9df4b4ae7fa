import numpy as np

from sfd_beam.domain.results import DiagramSeries, ResultSummary
from sfd_beam.engine.summary import summarize


def test_summary_uses_absolute_values():
    s = summarize(DiagramSeries(V=np.array([10.0, -12.5, 3.0]), M=np.array([0.0, -7.25, 4.0])))
    assert s.max_shear_N == 12.5
    assert s.max_moment_Nm == 7.25
    assert s.max_shear_text == "12.50"
    assert s.max_moment_text == "7.25"


def test_summary_all_zero():
    s = summarize(DiagramSeries(V=np.zeros(100), M=-np.zeros(100)))
    assert s.max_shear_text == "0.00"
    assert s.max_moment_text == "0.00"


def test_summary_keeps_full_precision():
    s = summarize(DiagramSeries(V=np.array([1.0 / 3.0]), M=np.array([2.0 / 3.0])))
    assert s.max_shear_N == 1.0 / 3.0
    assert s.max_shear_text == "0.33"
    assert s.max_moment_text == "0.67"


def test_summary_empty_series():
    s = summarize(DiagramSeries(V=np.array([]), M=np.array([])))
    assert s == ResultSummary(max_shear_N=0.0, max_moment_Nm=0.0)
