"""
smas: least-norm solutions of stoichiometric matrix equations.

Given a stoichiometric matrix S (species x reactions) and an accumulation
vector a, computes the reaction vector r that solves S r = a in the
least-squares sense with minimum norm, via the SVD-based pseudo-inverse.

Matrices and vectors are exchanged as plain-text documents: '%' comment
lines, a "<rows> <cols>" line, then the values in row-major order.
"""

__version__ = "0.1.0"

from .errors import (
    SmasError,
    MatrixIOError,
    FormatError,
    ParseError,
    SolveError,
    LengthMismatchError,
)

from .config import (
    FloatFormat,
    OutputOptions,
    SVD_EPSILON,
    DEFAULT_EPSILON,
    DEFAULT_PRECISION,
)

from .io import (
    MatrixDocument,
    parse_flat,
    parse_vector,
    parse_matrix,
    parse_document,
    read_document,
    load_matrix,
    load_vector,
    format_float,
    format_flat,
    format_document,
    format_comparison,
    write_text,
)

from .solve import (
    PseudoInverseSolver,
    SolveResult,
    pseudo_inverse,
    solve,
    solve_default,
)

from .util import (
    epsilon_eq,
    within_epsilon,
    default_s_matrix,
    format_matrix,
    print_matrix,
)

from .matrices import S_MAT, R_STD_015

from .visualization import (
    plot_comparison,
    plot_singular_values,
    plot_solution_panel,
)

__all__ = [
    # Errors
    "SmasError",
    "MatrixIOError",
    "FormatError",
    "ParseError",
    "SolveError",
    "LengthMismatchError",
    # Configuration
    "FloatFormat",
    "OutputOptions",
    "SVD_EPSILON",
    "DEFAULT_EPSILON",
    "DEFAULT_PRECISION",
    # Codec
    "MatrixDocument",
    "parse_flat",
    "parse_vector",
    "parse_matrix",
    "parse_document",
    "read_document",
    "load_matrix",
    "load_vector",
    "format_float",
    "format_flat",
    "format_document",
    "format_comparison",
    "write_text",
    # Solver
    "PseudoInverseSolver",
    "SolveResult",
    "pseudo_inverse",
    "solve",
    "solve_default",
    # Utilities
    "epsilon_eq",
    "within_epsilon",
    "default_s_matrix",
    "format_matrix",
    "print_matrix",
    # Built-in data
    "S_MAT",
    "R_STD_015",
    # Visualization
    "plot_comparison",
    "plot_singular_values",
    "plot_solution_panel",
]
