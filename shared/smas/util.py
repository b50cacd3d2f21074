"""Small helpers shared by the codec, the solver and the CLI."""

import sys
from typing import Optional, TextIO

import numpy as np
from numpy.typing import ArrayLike

from .matrices import S_MAT


def epsilon_eq(a: float, b: float, epsilon: float) -> bool:
    """
    Return True if a and b differ by strictly less than epsilon.

    Parameters
    ----------
    a, b : float
        Values to compare.
    epsilon : float
        Absolute tolerance.
    """
    return bool(abs(a - b) < epsilon)


def within_epsilon(computed: ArrayLike, truth: ArrayLike, epsilon: float) -> np.ndarray:
    """Element-wise epsilon_eq over two equal-length vectors."""
    computed = np.asarray(computed, dtype=float).ravel()
    truth = np.asarray(truth, dtype=float).ravel()
    return np.abs(computed - truth) < epsilon


def default_s_matrix() -> np.ndarray:
    """Return a writable copy of the built-in 39 x 28 stoichiometric matrix."""
    return np.array(S_MAT, dtype=float, copy=True)


def format_matrix(matrix: ArrayLike) -> str:
    """
    Tab-separated dump of a matrix, one row per line.

    A 1-D input is shown as a column, matching how vectors are stored in the
    interchange format.
    """
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim == 1:
        matrix = matrix.reshape(-1, 1)
    return "\n".join("\t".join(repr(float(v)) for v in row) for row in matrix)


def print_matrix(matrix: ArrayLike, file: Optional[TextIO] = None):
    print(format_matrix(matrix), file=file if file is not None else sys.stdout)
