# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""
Routine arguments and error-log entries

Arguments is the immutable record of every parameter of one sub-test. The
ARG_* names are the vocabulary callers use to select which fields show up in
failure reports.
"""

import dataclasses
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np


class Layout(IntEnum):
    ROW_MAJOR = 101
    COL_MAJOR = 102


class Transpose(IntEnum):
    NO = 111
    YES = 112
    CONJUGATE = 113


class Triangle(IntEnum):
    UPPER = 121
    LOWER = 122


class Side(IntEnum):
    LEFT = 141
    RIGHT = 142


# Argument names, as printed in failure reports
ARG_M = "m"
ARG_N = "n"
ARG_K = "k"
ARG_LAYOUT = "layout"
ARG_A_TRANSP = "transA"
ARG_B_TRANSP = "transB"
ARG_SIDE = "side"
ARG_TRIANGLE = "triangle"
ARG_X_INC = "incx"
ARG_Y_INC = "incy"
ARG_X_OFFSET = "offx"
ARG_Y_OFFSET = "offy"
ARG_A_LEAD_DIM = "lda"
ARG_B_LEAD_DIM = "ldb"
ARG_C_LEAD_DIM = "ldc"
ARG_A_OFFSET = "offa"
ARG_B_OFFSET = "offb"
ARG_C_OFFSET = "offc"
ARG_ALPHA = "alpha"
ARG_BETA = "beta"

# Argument name -> Arguments field, in report order
ARGUMENT_FIELDS = {
    ARG_M: "m",
    ARG_N: "n",
    ARG_K: "k",
    ARG_LAYOUT: "layout",
    ARG_A_TRANSP: "a_transpose",
    ARG_B_TRANSP: "b_transpose",
    ARG_SIDE: "side",
    ARG_TRIANGLE: "triangle",
    ARG_X_INC: "x_inc",
    ARG_Y_INC: "y_inc",
    ARG_X_OFFSET: "x_offset",
    ARG_Y_OFFSET: "y_offset",
    ARG_A_LEAD_DIM: "a_ld",
    ARG_B_LEAD_DIM: "b_ld",
    ARG_C_LEAD_DIM: "c_ld",
    ARG_A_OFFSET: "a_offset",
    ARG_B_OFFSET: "b_offset",
    ARG_C_OFFSET: "c_offset",
    ARG_ALPHA: "alpha",
    ARG_BETA: "beta",
}

# Sentinel error percentage marking a status-code mismatch
STATUS_ERROR = -1.0


@dataclass(frozen=True)
class Arguments:
    """All parameters of a single routine invocation.

    Only the fields relevant to a given routine are meaningful; the rest keep
    their defaults.
    """

    m: int = 0
    n: int = 0
    k: int = 0
    layout: Layout = Layout.ROW_MAJOR
    a_transpose: Transpose = Transpose.NO
    b_transpose: Transpose = Transpose.NO
    side: Side = Side.LEFT
    triangle: Triangle = Triangle.UPPER
    x_inc: int = 1
    y_inc: int = 1
    x_offset: int = 0
    y_offset: int = 0
    a_ld: int = 0
    b_ld: int = 0
    c_ld: int = 0
    a_offset: int = 0
    b_offset: int = 0
    c_offset: int = 0
    alpha: Any = 0
    beta: Any = 0

    def replace(self, **changes) -> "Arguments":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def selected(self, options: Iterable[str]) -> List[Tuple[str, Any]]:
        """(name, value) pairs for the selected argument names.

        Names without a matching field are skipped.
        """
        return [(name, getattr(self, ARGUMENT_FIELDS[name]))
                for name in options if name in ARGUMENT_FIELDS]

    def as_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, field) for name, field in ARGUMENT_FIELDS.items()}


@dataclass(frozen=True)
class ErrorLogEntry:
    """A failing sub-test.

    error_percentage is STATUS_ERROR for status-code mismatches, otherwise the
    share of mismatching elements.
    """

    status_expect: int
    status_found: int
    error_percentage: float
    args: Arguments

    @property
    def is_status_error(self) -> bool:
        return self.error_percentage == STATUS_ERROR


def format_argument(value: Any) -> str:
    """Render an argument value the way failure reports print it."""
    if isinstance(value, IntEnum):
        return str(int(value))
    if isinstance(value, (complex, np.complexfloating)):
        value = complex(value)
        return f"{value.real:g}{value.imag:+g}i"
    if isinstance(value, (float, np.floating)):
        return f"{float(value):g}"
    return str(value)
