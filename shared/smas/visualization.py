"""
Diagnostic plots for solved reaction vectors.

- Computed vs true reaction rates, with rows outside epsilon highlighted
- Singular value spectrum with the pseudo-inverse cutoff
"""

import os
from typing import List, Optional, Union

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes
from numpy.typing import ArrayLike

from .config import DEFAULT_EPSILON
from .errors import LengthMismatchError, MatrixIOError
from .solve import SolveResult
from .util import within_epsilon


plt.rcParams.update({
    'font.size': 10,
    'axes.labelsize': 11,
    'axes.titlesize': 11,
    'xtick.labelsize': 8,
    'ytick.labelsize': 9,
    'legend.fontsize': 9,
    'figure.dpi': 150,
    'savefig.dpi': 300,
    'savefig.bbox': 'tight',
})


def plot_comparison(
    computed: ArrayLike,
    truth: ArrayLike,
    epsilon: float = DEFAULT_EPSILON,
    reaction_names: Optional[List[str]] = None,
    ax: Optional[Axes] = None,
    title: Optional[str] = None,
) -> Axes:
    """
    Plot computed against true reaction rates.

    Rates span many orders of magnitude, so the y axis is symmetric-log with
    the linear region set to epsilon. Reactions whose |delta| >= epsilon are
    shaded red.

    Parameters
    ----------
    computed, truth : array_like
        Reaction vectors of equal length.
    epsilon : float
        Comparison tolerance.
    reaction_names : list of str, optional
        Tick labels; defaults to reaction indices.
    ax : Axes, optional
        Matplotlib axes.
    title : str, optional
        Plot title.

    Returns
    -------
    Axes
    """
    computed = np.asarray(computed, dtype=float).ravel()
    truth = np.asarray(truth, dtype=float).ravel()
    if computed.size != truth.size:
        raise LengthMismatchError(
            f"Cannot compare {computed.size} computed values with {truth.size} true values"
        )

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 4))

    idx = np.arange(computed.size)
    ok = within_epsilon(computed, truth, epsilon)

    for i in idx[~ok]:
        ax.axvspan(i - 0.5, i + 0.5, color='red', alpha=0.15, lw=0)

    ax.plot(idx, truth, 'o', mfc='none', color='C0', label='true')
    ax.plot(idx, computed, 'x', color='C1', label='computed')
    ax.plot(idx, np.abs(computed - truth), '.', color='gray', label='|Δ|')
    ax.axhline(epsilon, color='gray', ls=':', lw=1)

    ax.set_yscale('symlog', linthresh=epsilon)
    ax.set_xticks(idx)
    ax.set_xticklabels(reaction_names if reaction_names is not None else [str(i) for i in idx],
                       rotation=90 if reaction_names is not None else 0)
    ax.set_xlabel('Reaction')
    ax.set_ylabel('Rate')
    ax.legend(loc='best')

    n_bad = int(np.count_nonzero(~ok))
    ax.set_title(title if title else f'{computed.size - n_bad}/{computed.size} within ε = {epsilon:g}')

    return ax


def plot_singular_values(
    spectrum: Union[SolveResult, ArrayLike],
    cutoff: Optional[float] = None,
    ax: Optional[Axes] = None,
    title: Optional[str] = None,
) -> Axes:
    """
    Plot the singular value spectrum of S on a log scale.

    Parameters
    ----------
    spectrum : SolveResult or array_like
        A solve result (its singular values and cutoff are used) or the
        singular values themselves.
    cutoff : float, optional
        Threshold line; taken from the SolveResult when not given.
    ax : Axes, optional
        Matplotlib axes.
    title : str, optional
        Plot title.

    Returns
    -------
    Axes
    """
    if isinstance(spectrum, SolveResult):
        s = spectrum.singular_values
        if cutoff is None:
            cutoff = spectrum.cutoff
    else:
        s = np.asarray(spectrum, dtype=float).ravel()

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 4))

    idx = np.arange(1, s.size + 1)
    # zeros cannot be drawn on a log axis
    positive = s > 0
    ax.semilogy(idx[positive], s[positive], 'o-', color='C0', ms=4)

    if cutoff is not None and cutoff > 0:
        ax.axhline(cutoff, color='red', ls='--', lw=1, label=f'cutoff = {cutoff:.1e}')
        rank = int(np.count_nonzero(s > cutoff))
        ax.legend(loc='best')
    else:
        rank = int(np.count_nonzero(positive))

    ax.set_xlabel('Index')
    ax.set_ylabel('Singular value')
    ax.set_title(title if title else f'Singular values (rank {rank} of {s.size})')

    return ax


def plot_solution_panel(
    result: SolveResult,
    truth: ArrayLike,
    epsilon: float = DEFAULT_EPSILON,
    save_path: Optional[Union[str, os.PathLike]] = None,
    title: Optional[str] = None,
) -> Figure:
    """
    Comparison plot and singular value spectrum side by side.

    Returns
    -------
    Figure
    """
    fig, axes = plt.subplots(1, 2, figsize=(14, 4), gridspec_kw={'width_ratios': [2, 1]})

    plot_comparison(result.reactions, truth, epsilon=epsilon, ax=axes[0])
    plot_singular_values(result, ax=axes[1])

    if title:
        fig.suptitle(title, fontsize=12, y=1.02)

    plt.tight_layout()

    if save_path:
        save_figure(fig, save_path)

    return fig


def save_figure(fig: Figure, path: Union[str, os.PathLike]):
    """Save a figure, reporting failures as MatrixIOError."""
    try:
        fig.savefig(path)
    except OSError as e:
        raise MatrixIOError(f"Cannot write figure '{path}': {e}") from e
