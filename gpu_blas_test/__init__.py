"""
GPU BLAS Correctness Testing Package

This package compares GPU BLAS routines against a trusted reference over
many argument combinations and reports passed, skipped and failed sub-tests.

Copyright (c) 2025 Alessandro Baretta
All rights reserved.
"""

from .arguments import (
    ARG_A_LEAD_DIM,
    ARG_A_OFFSET,
    ARG_A_TRANSP,
    ARG_ALPHA,
    ARG_B_LEAD_DIM,
    ARG_B_OFFSET,
    ARG_B_TRANSP,
    ARG_BETA,
    ARG_C_LEAD_DIM,
    ARG_C_OFFSET,
    ARG_K,
    ARG_LAYOUT,
    ARG_M,
    ARG_N,
    ARG_SIDE,
    ARG_TRIANGLE,
    ARG_X_INC,
    ARG_X_OFFSET,
    ARG_Y_INC,
    ARG_Y_OFFSET,
    STATUS_ERROR,
    Arguments,
    ErrorLogEntry,
    Layout,
    Side,
    Transpose,
    Triangle,
)
from .device import DeviceContext, HostDeviceProvider
from .exceptions import DeviceError, ReferenceSetupError, TesterError
from .precision import Precision, default_margin, example_scalars, layouts, transposes
from .printer import RESULTS_PER_LINE, ReportPrinter, Symbol
from .reference import NumpyReference
from .results import GroupSummary, SessionSummary
from .similarity import count_errors, is_similar, similar_mask
from .status import StatusCode
from .tester import Tester

__version__ = "1.0.0"
__all__ = [
    "Tester",
    "Arguments",
    "ErrorLogEntry",
    "STATUS_ERROR",
    "Layout",
    "Transpose",
    "Side",
    "Triangle",
    "StatusCode",
    "Precision",
    "example_scalars",
    "layouts",
    "transposes",
    "default_margin",
    "is_similar",
    "similar_mask",
    "count_errors",
    "ReportPrinter",
    "Symbol",
    "RESULTS_PER_LINE",
    "GroupSummary",
    "SessionSummary",
    "DeviceContext",
    "HostDeviceProvider",
    "NumpyReference",
    "TesterError",
    "DeviceError",
    "ReferenceSetupError",
    "ARG_M",
    "ARG_N",
    "ARG_K",
    "ARG_LAYOUT",
    "ARG_A_TRANSP",
    "ARG_B_TRANSP",
    "ARG_SIDE",
    "ARG_TRIANGLE",
    "ARG_X_INC",
    "ARG_Y_INC",
    "ARG_X_OFFSET",
    "ARG_Y_OFFSET",
    "ARG_A_LEAD_DIM",
    "ARG_B_LEAD_DIM",
    "ARG_C_LEAD_DIM",
    "ARG_A_OFFSET",
    "ARG_B_OFFSET",
    "ARG_C_OFFSET",
    "ARG_ALPHA",
    "ARG_BETA",
]
