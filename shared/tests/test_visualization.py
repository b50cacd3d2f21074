"""Smoke tests for the diagnostic plots."""

from pathlib import Path

import numpy as np
import pytest

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from smas import visualization as viz
from smas.errors import LengthMismatchError
from smas.matrices import R_STD_015, S_MAT
from smas.solve import PseudoInverseSolver


@pytest.fixture
def default_result():
    return PseudoInverseSolver().solve_system(S_MAT @ R_STD_015, S_MAT)


class TestPlots:

    def teardown_method(self):
        plt.close('all')

    def test_plot_comparison(self):
        ax = viz.plot_comparison([1.0, 2.0, 3.0], [1.0, 2.5, 3.0], epsilon=1e-3)
        assert ax is not None
        assert ax.get_title() == '2/3 within ε = 0.001'

    def test_plot_comparison_names(self):
        ax = viz.plot_comparison([1.0, 2.0], [1.0, 2.0], reaction_names=['R1', 'R2'])
        assert [t.get_text() for t in ax.get_xticklabels()] == ['R1', 'R2']

    def test_plot_comparison_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            viz.plot_comparison([1.0, 2.0], [1.0])

    def test_plot_singular_values_from_result(self, default_result):
        ax = viz.plot_singular_values(default_result)
        assert ax is not None
        assert f'of {default_result.singular_values.size}' in ax.get_title()

    def test_plot_singular_values_from_array(self):
        ax = viz.plot_singular_values(np.array([3.0, 1.0, 0.0]), cutoff=1e-9)
        assert 'rank 2 of 3' in ax.get_title()

    def test_plot_solution_panel_saves(self, default_result, tmp_path):
        path = tmp_path / 'panel.png'
        fig = viz.plot_solution_panel(default_result, R_STD_015, save_path=path)
        assert fig is not None
        assert Path(path).exists()
        assert Path(path).stat().st_size > 0
