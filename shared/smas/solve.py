"""
Least-norm solver for S r = a.

S is a stoichiometric matrix (m species x n reactions) and a is an
accumulation vector of length m. The reaction vector r is computed as
S+ a, where S+ is the Moore-Penrose pseudo-inverse built from a thin SVD:

    S = U diag(s) V^T,    S+ = V diag(s+) U^T

with s+_i = 1 / s_i for singular values strictly above the cutoff and 0
otherwise. Discarding the near-null directions keeps the solve stable for
ill-conditioned S and makes r the minimum-norm least-squares solution; when
S has full column rank r is the unique least-squares solution.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
import scipy
from numpy.typing import ArrayLike
from scipy import linalg

from .config import SVD_EPSILON, FloatFormat
from .errors import SolveError
from .io import format_flat, parse_vector
from .util import default_s_matrix

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """Solution of S r = a plus the numerical details behind it."""

    reactions: np.ndarray           # r (n,)
    rank: int                       # singular values kept
    n_species: int                  # m
    n_reactions: int                # n

    singular_values: np.ndarray     # full thin spectrum, descending
    cutoff: float                   # absolute threshold applied to s
    residual_norm: float            # ||S r - a||_2

    svd_epsilon: float
    numpy_version: str = ""
    scipy_version: str = ""

    @property
    def has_full_column_rank(self) -> bool:
        """True if r is the unique least-squares solution."""
        return self.rank == self.n_reactions

    def __repr__(self) -> str:
        return (
            f"SolveResult(\n"
            f"  n_species={self.n_species}, n_reactions={self.n_reactions}, "
            f"rank={self.rank},\n"
            f"  svd_epsilon={self.svd_epsilon:.2e}, cutoff={self.cutoff:.2e},\n"
            f"  residual_norm={self.residual_norm:.3e},\n"
            f"  numpy={self.numpy_version}, scipy={self.scipy_version}\n"
            f")"
        )


class PseudoInverseSolver:
    """
    SVD-based pseudo-inverse solver.

    Parameters
    ----------
    svd_epsilon : float
        Singular value cutoff. Singular values <= cutoff are treated as zero.
    relative : bool
        If True (default) the cutoff is svd_epsilon * s_max, the convention of
        numpy.linalg.pinv and scipy.linalg.pinv. If False svd_epsilon is used
        as an absolute threshold.

    Examples
    --------
    >>> solver = PseudoInverseSolver()
    >>> S = np.array([[1.0, 1.0]])        # one species, two reactions
    >>> solver.solve_system([2.0], S).reactions
    array([1., 1.])
    """

    def __init__(self, svd_epsilon: float = SVD_EPSILON, relative: bool = True):
        if not svd_epsilon >= 0:
            raise ValueError(f"svd_epsilon must be >= 0, got {svd_epsilon}")
        self.svd_epsilon = float(svd_epsilon)
        self.relative = relative

    def decompose(self, S: ArrayLike) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Thin SVD of S.

        Returns
        -------
        U : (m, k) ndarray
        s : (k,) ndarray, descending
        Vt : (k, n) ndarray

        Raises
        ------
        SolveError
            If S has non-finite entries or the decomposition does not converge.
        """
        S = _as_matrix(S)
        if not np.all(np.isfinite(S)):
            raise SolveError(
                "pseudo-inverse computation failed: stoichiometric matrix "
                "contains NaN or infinite entries"
            )
        try:
            U, s, Vt = linalg.svd(S, full_matrices=False, lapack_driver="gesvd")
        except (np.linalg.LinAlgError, ValueError) as e:
            raise SolveError(f"pseudo-inverse computation failed: {e}") from e
        return U, s, Vt

    def cutoff(self, singular_values: np.ndarray) -> float:
        """Absolute threshold for a spectrum (largest value first)."""
        if not self.relative:
            return self.svd_epsilon
        if singular_values.size == 0:
            return 0.0
        return self.svd_epsilon * float(singular_values[0])

    def _inverted_spectrum(self, s: np.ndarray) -> Tuple[np.ndarray, float, int]:
        cutoff = self.cutoff(s)
        keep = s > cutoff
        s_inv = np.zeros_like(s)
        s_inv[keep] = 1.0 / s[keep]
        return s_inv, cutoff, int(np.count_nonzero(keep))

    def pseudo_inverse(self, S: ArrayLike) -> np.ndarray:
        """Moore-Penrose pseudo-inverse of S, shape (n, m)."""
        U, s, Vt = self.decompose(S)
        s_inv, _, _ = self._inverted_spectrum(s)
        return (Vt.T * s_inv) @ U.T

    def solve_system(self, a: ArrayLike, S: ArrayLike) -> SolveResult:
        """
        Solve S r = a for the least-norm r.

        Parameters
        ----------
        a : array_like
            Accumulation vector, length m (1D or a single column).
        S : array_like
            Stoichiometric matrix, shape (m, n).

        Returns
        -------
        SolveResult

        Raises
        ------
        ValueError
            If the shapes of a and S are incompatible.
        SolveError
            If a or S has non-finite entries, or the SVD does not converge.
        """
        S = _as_matrix(S)
        m, n = S.shape
        a = _as_rhs(a, m)
        if not np.all(np.isfinite(a)):
            raise SolveError(
                "pseudo-inverse computation failed: accumulation vector "
                "contains NaN or infinite entries"
            )

        U, s, Vt = self.decompose(S)
        s_inv, cutoff, rank = self._inverted_spectrum(s)

        # V diag(s+) U^T a, without forming S+ explicitly
        r = Vt.T @ (s_inv * (U.T @ a))
        residual_norm = float(np.linalg.norm(S @ r - a))

        logger.debug(
            f"SVD of {m} x {n} matrix: s_max={s[0]:.3e}, cutoff={cutoff:.3e}, rank={rank}"
        )
        if rank < n:
            logger.info(
                f"Rank {rank} < {n} reactions; returning the minimum-norm solution"
            )
        scale = max(1.0, float(np.linalg.norm(a)))
        if residual_norm > np.sqrt(np.finfo(float).eps) * scale:
            logger.warning(
                f"System is inconsistent (||S r - a|| = {residual_norm:.3e}); "
                f"returning the least-squares solution"
            )

        return SolveResult(
            reactions=r,
            rank=rank,
            n_species=m,
            n_reactions=n,
            singular_values=s,
            cutoff=cutoff,
            residual_norm=residual_norm,
            svd_epsilon=self.svd_epsilon,
            numpy_version=np.__version__,
            scipy_version=scipy.__version__,
        )


def _as_matrix(S: ArrayLike) -> np.ndarray:
    S = np.asarray(S, dtype=float)
    if S.ndim != 2:
        raise ValueError(f"S must be 2D, got shape {S.shape}")
    if 0 in S.shape:
        raise ValueError(f"S must have at least one row and one column, got shape {S.shape}")
    return S


def _as_rhs(a: ArrayLike, n_rows: int) -> np.ndarray:
    a = np.asarray(a, dtype=float)
    if a.ndim == 2 and a.shape[1] == 1:
        a = a[:, 0]
    if a.ndim != 1:
        raise ValueError(f"Accumulation vector must be 1D, got shape {a.shape}")
    if a.size != n_rows:
        raise ValueError(
            f"Accumulation vector has {a.size} entries but S has {n_rows} rows"
        )
    return a


def pseudo_inverse(S: ArrayLike, svd_epsilon: float = SVD_EPSILON) -> np.ndarray:
    """Convenience function for the pseudo-inverse of S."""
    return PseudoInverseSolver(svd_epsilon).pseudo_inverse(S)


def solve(a: ArrayLike, S: ArrayLike, svd_epsilon: float = SVD_EPSILON) -> np.ndarray:
    """
    Convenience function returning only the reaction vector.

    Parameters
    ----------
    a : array_like
        Accumulation vector (m,).
    S : array_like
        Stoichiometric matrix (m, n).
    svd_epsilon : float
        Relative singular value cutoff.

    Returns
    -------
    np.ndarray
        Reaction vector r (n,).
    """
    return PseudoInverseSolver(svd_epsilon).solve_system(a, S).reactions


def solve_default(vector_string: str) -> str:
    """
    Solve against the built-in matrix, string in, string out.

    The accumulation vector is a whitespace-delimited string of 39 floats;
    the 28 reaction rates come back as decimals with five digits.
    """
    a = parse_vector(vector_string)
    r = solve(a, default_s_matrix())
    return format_flat(r, FloatFormat.DECIMAL, 5)
