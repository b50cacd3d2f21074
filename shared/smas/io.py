"""
Dense matrix text codec.

Reads and writes the two text forms used for stoichiometric data.

Interchange document::

    % free-text header, zero or more lines
    <rows> <cols>
    <v_1> <v_2> ... <v_rows*cols>

Values follow the dimension line in row-major order (token k is element
[k // cols, k % cols]); line breaks between values carry no meaning.

Flat string: whitespace-delimited floats with no header, row-major, the
shape being supplied by the caller.

Malformed input always raises; a matrix is never truncated or zero-padded
to fit its declared shape.
"""

import logging
import numbers
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, List, Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from .config import (
    COMMENT_MARKER,
    DEFAULT_EPSILON,
    DEFAULT_FLOAT_FORMAT,
    DEFAULT_PRECISION,
    FloatFormat,
)
from .errors import FormatError, LengthMismatchError, MatrixIOError, ParseError
from .util import within_epsilon

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, IO[str]]

COMPARISON_HEADER = "% computed \t true \t |delta| \t |delta|<=epsilon"


@dataclass
class MatrixDocument:
    """A parsed interchange document."""

    rows: int
    cols: int
    values: np.ndarray              # row-major, length rows*cols
    header: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.values.size != self.rows * self.cols:
            raise FormatError(
                f"{self.rows} x {self.cols} matrix needs {self.rows * self.cols} "
                f"values, got {self.values.size}"
            )

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def as_matrix(self) -> np.ndarray:
        """Return the values as a (rows, cols) array."""
        return self.values.reshape(self.rows, self.cols).copy()

    def as_vector(self) -> np.ndarray:
        """Return the values as a 1-D array; the document must be n x 1 or 1 x n."""
        if self.rows != 1 and self.cols != 1:
            raise FormatError(
                f"Expected a vector (n x 1 or 1 x n), got a {self.rows} x {self.cols} matrix"
            )
        return self.values.copy()


# =============================================================================
# Parsing
# =============================================================================

def _parse_tokens(tokens: List[str], where: str = "") -> np.ndarray:
    """Parse tokens as float64, failing on the first invalid literal."""
    values = np.empty(len(tokens), dtype=float)
    for k, token in enumerate(tokens):
        # float() accepts digit separators, plain decimal literals do not
        if "_" in token:
            raise ParseError(f"Invalid float literal {token!r} (token {k}{where})")
        try:
            values[k] = float(token)
        except ValueError:
            raise ParseError(f"Invalid float literal {token!r} (token {k}{where})") from None
    return values


def _check_dim(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise FormatError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def _resolve_shape(
    n_values: int,
    rows: Optional[int],
    cols: Optional[int],
) -> Tuple[int, int]:
    """Fill in a missing dimension and check rows*cols against the token count."""
    if rows is None:
        cols = _check_dim(cols, "cols")
        if n_values % cols:
            raise FormatError(f"{n_values} values cannot fill rows of {cols} columns")
        rows = n_values // cols
    elif cols is None:
        rows = _check_dim(rows, "rows")
        if n_values % rows:
            raise FormatError(f"{n_values} values cannot fill columns of {rows} rows")
        cols = n_values // rows
    else:
        rows = _check_dim(rows, "rows")
        cols = _check_dim(cols, "cols")
        if n_values != rows * cols:
            raise FormatError(
                f"Expected {rows} x {cols} = {rows * cols} values, got {n_values}"
            )
    return rows, cols


def parse_flat(
    text: str,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
) -> np.ndarray:
    """
    Parse a whitespace-delimited string of floats.

    Parameters
    ----------
    text : str
        Values in row-major order, separated by any run of whitespace.
    rows, cols : int, optional
        Matrix shape. With neither given, a 1-D vector of every token is
        returned. With one given, the other is inferred from the token count.

    Returns
    -------
    np.ndarray
        1-D vector, or a (rows, cols) matrix where token k is element
        [k // cols, k % cols].

    Raises
    ------
    ParseError
        If any token is not a valid float literal.
    FormatError
        If the input is empty or the token count does not match the shape.
    """
    tokens = text.split()
    if not tokens:
        raise FormatError("Empty input: no values to parse")

    values = _parse_tokens(tokens)
    if rows is None and cols is None:
        return values

    rows, cols = _resolve_shape(values.size, rows, cols)
    return values.reshape(rows, cols)


def parse_vector(text: str) -> np.ndarray:
    """Parse a flat string into a 1-D vector."""
    return parse_flat(text)


def parse_matrix(text: str, rows: int, cols: int) -> np.ndarray:
    """Parse a flat row-major string into a (rows, cols) matrix."""
    return parse_flat(text, rows, cols)


def _parse_dimension_line(line: str, where: str) -> Tuple[int, int]:
    tokens = line.split()
    if len(tokens) < 2:
        raise FormatError(f"Dimension line must hold '<rows> <cols>'{where}, got {line!r}")
    if not (tokens[0].isdecimal() and tokens[1].isdecimal()):
        raise FormatError(f"Dimension line must hold two unsigned integers{where}, got {line!r}")
    rows, cols = int(tokens[0]), int(tokens[1])
    if rows < 1 or cols < 1:
        raise FormatError(f"Matrix dimensions must be positive{where}, got {rows} x {cols}")
    return rows, cols


def parse_document(text: str, name: str = "<string>") -> MatrixDocument:
    """
    Parse an interchange document held in a string.

    Comment lines (first non-blank character '%') are skipped anywhere; those
    before the dimension line are kept as the header. Blank lines before the
    dimension line are ignored. Extra tokens on the dimension line are ignored,
    so the "n 1 n" line written by format_document reads back as n x 1.

    Raises
    ------
    FormatError
        No dimension line, a malformed one, or a value count that differs
        from rows*cols.
    ParseError
        A value token is not a valid float literal.
    """
    header: List[str] = []
    dims: Optional[Tuple[int, int]] = None
    chunks: List[np.ndarray] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if stripped.startswith(COMMENT_MARKER):
            if dims is None:
                header.append(stripped.lstrip(COMMENT_MARKER).strip())
            continue
        if not stripped:
            continue

        where = f" on line {lineno} of {name}"
        if dims is None:
            dims = _parse_dimension_line(stripped, where)
            logger.debug(f"{name}: dimension line {dims[0]} x {dims[1]}")
            continue
        chunks.append(_parse_tokens(stripped.split(), where))

    if dims is None:
        raise FormatError(f"{name}: no dimension line found")

    rows, cols = dims
    values = np.concatenate(chunks) if chunks else np.empty(0, dtype=float)
    if values.size != rows * cols:
        raise FormatError(
            f"{name}: short read, a {rows} x {cols} matrix needs {rows * cols} "
            f"values but {values.size} were found"
        )

    return MatrixDocument(rows=rows, cols=cols, values=values, header=header)


def read_document(source: Source) -> MatrixDocument:
    """
    Read an interchange document from a path or an open text stream.

    A path is opened once and closed before parsing starts.

    Raises
    ------
    MatrixIOError
        The file is missing or unreadable.
    FormatError, ParseError
        See parse_document.
    """
    if hasattr(source, "read"):
        name = getattr(source, "name", "<stream>")
        try:
            text = source.read()
        except (OSError, UnicodeDecodeError) as e:
            raise MatrixIOError(f"Cannot read matrix stream {name}: {e}") from e
        return parse_document(text, name=str(name))

    path = Path(source)
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise MatrixIOError(f"Cannot read matrix file '{path}': {e}") from e

    document = parse_document(text, name=str(path))
    logger.info(f"Read {document.rows} x {document.cols} matrix from {path}")
    return document


def load_matrix(source: Source) -> np.ndarray:
    """Read a document and return it as a (rows, cols) matrix."""
    return read_document(source).as_matrix()


def load_vector(source: Source) -> np.ndarray:
    """Read an n x 1 (or 1 x n) document and return it as a 1-D vector."""
    return read_document(source).as_vector()


# =============================================================================
# Formatting
# =============================================================================

def _as_vector(vector: ArrayLike, name: str = "vector") -> np.ndarray:
    v = np.asarray(vector, dtype=float)
    if v.ndim == 2 and 1 in v.shape:
        v = v.ravel()
    if v.ndim != 1:
        raise ValueError(f"{name} must be 1D (or a single row/column), got shape {v.shape}")
    if v.size == 0:
        raise ValueError(f"{name} is empty")
    return v


def _check_precision(precision: int) -> int:
    if isinstance(precision, bool) or int(precision) != precision or precision < 0:
        raise ValueError(f"precision must be a non-negative integer, got {precision!r}")
    return int(precision)


def format_float(
    value: float,
    float_format: Union[FloatFormat, str] = DEFAULT_FLOAT_FORMAT,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """
    Format one float.

    DECIMAL gives `precision` digits after the point (0.00100).
    SCIENTIFIC gives a mantissa with `precision` digits after the point and a
    signed exponent of at least two digits (1.00000e-03).
    """
    float_format = FloatFormat.parse(float_format)
    precision = _check_precision(precision)
    if float_format is FloatFormat.DECIMAL:
        return f"{value:.{precision}f}"
    return f"{value:.{precision}e}"


def format_flat(
    vector: ArrayLike,
    float_format: Union[FloatFormat, str] = DEFAULT_FLOAT_FORMAT,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Values separated by single spaces, no trailing newline."""
    v = _as_vector(vector)
    return " ".join(format_float(x, float_format, precision) for x in v)


def format_document(
    vector: ArrayLike,
    float_format: Union[FloatFormat, str] = DEFAULT_FLOAT_FORMAT,
    precision: int = DEFAULT_PRECISION,
    header: str = "",
) -> str:
    """
    Format a vector as an interchange document.

    Layout::

        % <header>
        <n> 1 <n>
          <v_1>
          ...
          <v_n>

    A multi-line header becomes one comment line per header line.
    There is no newline after the last value.
    """
    v = _as_vector(vector)
    n = v.size
    lines = [f"{COMMENT_MARKER} {h}" for h in header.splitlines() or [""]]
    lines.append(f"{n} 1 {n}")
    lines.extend(f"  {format_float(x, float_format, precision)}" for x in v)
    return "\n".join(lines)


def format_comparison(
    computed: ArrayLike,
    truth: ArrayLike,
    float_format: Union[FloatFormat, str] = DEFAULT_FLOAT_FORMAT,
    precision: int = DEFAULT_PRECISION,
    epsilon: float = DEFAULT_EPSILON,
) -> str:
    """
    Tabulate computed against true values.

    One header row, then per element: computed, true, |delta| and whether
    |delta| < epsilon (``true``/``false``), tab separated. No trailing newline.

    Raises
    ------
    LengthMismatchError
        If the two vectors differ in length.
    """
    computed = _as_vector(computed, "computed")
    truth = _as_vector(truth, "truth")
    if computed.size != truth.size:
        raise LengthMismatchError(
            f"Cannot compare {computed.size} computed values with {truth.size} true values"
        )

    flags = within_epsilon(computed, truth, epsilon)
    rows = [COMPARISON_HEADER]
    for c, t, ok in zip(computed, truth, flags):
        rows.append(
            f"  {format_float(c, float_format, precision)}"
            f"\t{format_float(t, float_format, precision)}"
            f"\t{format_float(abs(c - t), float_format, precision)}"
            f"\t{'true' if ok else 'false'}"
        )
    return "\n".join(rows)


def write_text(text: str, destination: Union[str, os.PathLike]):
    """
    Write formatted output to a file, followed by a newline.

    Parent directories are created as needed.
    """
    path = Path(destination)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(text)
            f.write("\n")
    except OSError as e:
        raise MatrixIOError(f"Cannot write output file '{path}': {e}") from e
    logger.info(f"Wrote {len(text)} characters to {path}")
