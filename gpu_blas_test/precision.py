# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""
Numeric precisions supported by the tester

Each precision is a closed tag mapping to a NumPy scalar type. The per-type
fixture tables (example scalars, layouts, transpose options) are pure
functions of the tag.
"""

from enum import Enum
from typing import Tuple

import numpy as np

from .arguments import Layout, Transpose


class Precision(Enum):
    """Numeric type of the routine under test."""

    REAL32 = "real32"
    REAL64 = "real64"
    COMPLEX32 = "complex32"
    COMPLEX64 = "complex64"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(_DTYPES[self])

    @property
    def real_dtype(self) -> np.dtype:
        """Type of a single component (the dtype itself for real precisions)."""
        return np.dtype(_REAL_DTYPES[self])

    @property
    def is_complex(self) -> bool:
        return self in (Precision.COMPLEX32, Precision.COMPLEX64)

    @classmethod
    def from_dtype(cls, dtype) -> "Precision":
        """Look up the precision of a NumPy dtype (or scalar type)."""
        dtype = np.dtype(dtype)
        for precision, candidate in _DTYPES.items():
            if np.dtype(candidate) == dtype:
                return precision
        raise ValueError(
            f"Unsupported dtype {dtype}.\n"
            f"Must be one of: {[np.dtype(t).name for t in _DTYPES.values()]}"
        )


_DTYPES = {
    Precision.REAL32: np.float32,
    Precision.REAL64: np.float64,
    Precision.COMPLEX32: np.complex64,
    Precision.COMPLEX64: np.complex128,
}

_REAL_DTYPES = {
    Precision.REAL32: np.float32,
    Precision.REAL64: np.float64,
    Precision.COMPLEX32: np.float32,
    Precision.COMPLEX64: np.float64,
}

# Significand width (including the implicit bit) of each component type
_SIGNIFICAND_BITS = {
    np.dtype(np.float32): 24,
    np.dtype(np.float64): 53,
}

# Bits of precision a routine may lose before a result counts as wrong
DEFAULT_LOSS_BITS = 6


def example_scalars(precision: Precision) -> Tuple:
    """Example values for the alpha and beta arguments of the routines."""
    scalar = precision.dtype.type
    if precision.is_complex:
        return (scalar(0.0 + 0.0j), scalar(1.0 + 1.3j), scalar(2.42 + 3.14j))
    return (scalar(0.0), scalar(1.0), scalar(3.14))


def layouts(precision: Precision) -> Tuple[Layout, ...]:
    """Matrix layouts to test with (the same for every precision)."""
    return (Layout.ROW_MAJOR, Layout.COL_MAJOR)


def transposes(precision: Precision) -> Tuple[Transpose, ...]:
    """Transpose options to test with; conjugation only exists for complex types."""
    if precision.is_complex:
        return (Transpose.NO, Transpose.YES, Transpose.CONJUGATE)
    return (Transpose.NO, Transpose.YES)


def default_margin(precision: Precision, loss_bits: int = DEFAULT_LOSS_BITS) -> float:
    """Relative error margin for a precision.

    float32: 24-6=18 bits -> 2^(-18) ~ 3.8e-6
    float64: 53-6=47 bits -> 2^(-47) ~ 7.1e-15
    """
    significand_bits = _SIGNIFICAND_BITS[precision.real_dtype]
    return 0.5 ** (significand_bits - loss_bits)
