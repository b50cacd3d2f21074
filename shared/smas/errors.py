"""
Exception hierarchy for smas.

Every failure the codec or the solver can report derives from SmasError,
and also from the closest builtin exception so callers that only know the
standard library can still catch them:

- MatrixIOError       : missing or unreadable file (OSError)
- FormatError         : bad dimension line, token count mismatch,
                        document without a dimension line (ValueError)
- ParseError          : a token is not a floating point literal (ValueError)
- SolveError          : the pseudo-inverse could not be computed
                        (ArithmeticError)
- LengthMismatchError : computed/true vectors differ in length (IndexError)
"""


class SmasError(Exception):
    """Base class for all smas errors."""


class MatrixIOError(SmasError, OSError):
    """A matrix file could not be opened, read or written."""


class FormatError(SmasError, ValueError):
    """The text does not describe a well-formed matrix."""


class ParseError(SmasError, ValueError):
    """A token could not be parsed as a 64-bit float."""


class SolveError(SmasError, ArithmeticError):
    """The linear system could not be solved."""


class LengthMismatchError(SmasError, IndexError):
    """Two vectors that must be compared element-wise differ in length."""
