"""
Defaults and output options.

All values here are process-wide constants; nothing in this module is
mutated after import.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union


class FloatFormat(Enum):
    """How floats are rendered in output."""
    SCIENTIFIC = "scientific"   # 1.00000e-03
    DECIMAL = "decimal"         # 0.00100

    @classmethod
    def parse(cls, value: Union["FloatFormat", str]) -> "FloatFormat":
        """Accept a FloatFormat or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(
                f"Unknown float format: {value!r} (expected one of: {choices})"
            ) from None


COMMENT_MARKER = "%"

# Bundled fixtures (interchange documents)
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_MATRIX_PATH = DATA_DIR / "smat.txt"
REFERENCE_REACTIONS_PATH = DATA_DIR / "rstd015.txt"

# Singular values at or below SVD_EPSILON * sigma_max are treated as zero
SVD_EPSILON = 1e-9

DEFAULT_EPSILON = 1e-3
DEFAULT_PRECISION = 5
DEFAULT_FLOAT_FORMAT = FloatFormat.SCIENTIFIC


@dataclass(frozen=True)
class OutputOptions:
    """Formatting options shared by the output functions and the CLI."""

    float_format: FloatFormat = DEFAULT_FLOAT_FORMAT
    precision: int = DEFAULT_PRECISION
    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")
        if not self.epsilon > 0:
            raise ValueError(f"epsilon must be > 0, got {self.epsilon}")

    @classmethod
    def from_strings(
        cls,
        float_format: Union[FloatFormat, str] = DEFAULT_FLOAT_FORMAT,
        precision: Union[int, str] = DEFAULT_PRECISION,
        epsilon: Union[float, str] = DEFAULT_EPSILON,
    ) -> "OutputOptions":
        return cls(
            float_format=FloatFormat.parse(float_format),
            precision=int(precision),
            epsilon=float(epsilon),
        )
