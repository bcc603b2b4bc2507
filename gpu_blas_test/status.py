# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""
Status codes returned by reference and candidate routines

Values follow the OpenCL error codes where one exists, with the BLAS-level
codes in the -1000 and -2000 ranges.
"""

from enum import IntEnum
from typing import Union


class StatusCode(IntEnum):
    SUCCESS = 0
    COMPILER_NOT_AVAILABLE = -3
    TEMP_BUFFER_ALLOC_FAILURE = -4
    OUT_OF_RESOURCES = -5
    OUT_OF_HOST_MEMORY = -6
    BUILD_PROGRAM_FAILURE = -11
    INVALID_VALUE = -30
    INVALID_COMMAND_QUEUE = -36
    INVALID_MEM_OBJECT = -38
    INVALID_BINARY = -42
    INVALID_BUILD_OPTIONS = -43
    INVALID_PROGRAM = -44
    INVALID_PROGRAM_EXECUTABLE = -45
    INVALID_KERNEL_NAME = -46
    INVALID_KERNEL_DEFINITION = -47
    INVALID_KERNEL = -48
    INVALID_ARG_INDEX = -49
    INVALID_ARG_VALUE = -50
    INVALID_ARG_SIZE = -51
    INVALID_KERNEL_ARGS = -52
    INVALID_LOCAL_NUM_DIMENSIONS = -53
    INVALID_LOCAL_THREADS_TOTAL = -54
    INVALID_LOCAL_THREADS_DIM = -55
    INVALID_GLOBAL_OFFSET = -56
    INVALID_EVENT_WAIT_LIST = -57
    INVALID_EVENT = -58
    INVALID_OPERATION = -59
    INVALID_BUFFER_SIZE = -61
    INVALID_GLOBAL_WORK_SIZE = -63

    NOT_IMPLEMENTED = -1024
    INVALID_MATRIX_A = -1022
    INVALID_MATRIX_B = -1021
    INVALID_MATRIX_C = -1020
    INVALID_VECTOR_X = -1019
    INVALID_VECTOR_Y = -1018
    INVALID_DIMENSION = -1017
    INVALID_LEAD_DIM_A = -1016
    INVALID_LEAD_DIM_B = -1015
    INVALID_LEAD_DIM_C = -1014
    INVALID_INCREMENT_X = -1013
    INVALID_INCREMENT_Y = -1012
    INSUFFICIENT_MEMORY_A = -1011
    INSUFFICIENT_MEMORY_B = -1010
    INSUFFICIENT_MEMORY_C = -1009
    INSUFFICIENT_MEMORY_X = -1008
    INSUFFICIENT_MEMORY_Y = -1007

    KERNEL_LAUNCH_ERROR = -2048
    KERNEL_RUN_ERROR = -2047
    INVALID_LOCAL_MEM_USAGE = -2046
    NO_HALF_PRECISION = -2045
    NO_DOUBLE_PRECISION = -2044
    INVALID_VECTOR_SCALAR = -2043
    INSUFFICIENT_MEMORY_SCALAR = -2042
    DATABASE_ERROR = -2041
    UNKNOWN_ERROR = -2040
    UNEXPECTED_ERROR = -2039


# Candidate outcomes caused by the platform rather than by a wrong result
UNSUPPORTED_PRECISION_CODES = frozenset({
    StatusCode.NO_DOUBLE_PRECISION,
    StatusCode.NO_HALF_PRECISION,
})

SKIPPED_COMPILATION_CODES = frozenset({
    StatusCode.BUILD_PROGRAM_FAILURE,
    StatusCode.NOT_IMPLEMENTED,
})


def as_status(code: Union[StatusCode, int]) -> Union[StatusCode, int]:
    """Coerce an int to a StatusCode when it names one, otherwise keep it as is."""
    try:
        return StatusCode(code)
    except ValueError:
        return int(code)


def is_unsupported_precision(code: Union[StatusCode, int]) -> bool:
    return code in UNSUPPORTED_PRECISION_CODES


def is_skipped_compilation(code: Union[StatusCode, int]) -> bool:
    return code in SKIPPED_COMPILATION_CODES
