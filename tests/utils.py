"""
Test utilities for gpu-blas-test test suite.

NumPy reference routines standing in for the reference and candidate
libraries, plus test doubles for the device and reference collaborators.
"""

import numpy as np

from gpu_blas_test import DeviceContext, Layout, StatusCode, Transpose


def _op(mat, transpose):
    if transpose == Transpose.YES:
        return mat.T
    if transpose == Transpose.CONJUGATE:
        return mat.conj().T
    return mat


def get_numpy_reference_axpy(args, x, y):
    """y = alpha * x + y, honouring increments and offsets."""
    result = y.copy()
    xs = x[args.x_offset::args.x_inc][:args.n]
    result[args.y_offset::args.y_inc][:args.n] += args.alpha * xs
    return result


def get_numpy_reference_gemm(args, a, b, c):
    """C = alpha * op(A) @ op(B) + beta * C on 2-D arrays in the given layout.

    Arrays are stored as written by the caller; ColMajor arrays are the
    transposes of their logical matrices.
    """
    if args.layout == Layout.COL_MAJOR:
        a, b, c = a.T, b.T, c.T
    result = args.alpha * (_op(a, args.a_transpose) @ _op(b, args.b_transpose)) + args.beta * c
    result = result.astype(c.dtype)
    if args.layout == Layout.COL_MAJOR:
        result = result.T
    return np.ascontiguousarray(result)


def validate_axpy_arguments(args, x, y):
    """Status code a BLAS library returns for AXPY arguments."""
    if args.n == 0:
        return StatusCode.INVALID_DIMENSION
    if args.x_inc == 0:
        return StatusCode.INVALID_INCREMENT_X
    if args.y_inc == 0:
        return StatusCode.INVALID_INCREMENT_Y
    if x.size < args.x_offset + (args.n - 1) * args.x_inc + 1:
        return StatusCode.INSUFFICIENT_MEMORY_X
    if y.size < args.y_offset + (args.n - 1) * args.y_inc + 1:
        return StatusCode.INSUFFICIENT_MEMORY_Y
    return StatusCode.SUCCESS


def make_buggy(routine, every=3):
    """Wrap a routine so that every n-th call corrupts the first element."""
    calls = {"count": 0}

    def _buggy(*args):
        result = routine(*args)
        calls["count"] += 1
        if calls["count"] % every == 0:
            result = result.copy()
            result.flat[0] = result.flat[0] + 1
        return result
    return _buggy


class RecordingReference:
    """Reference library that records its lifecycle."""

    name = "recording"

    def __init__(self, status=StatusCode.SUCCESS):
        self.status = status
        self.setup_calls = 0
        self.teardown_calls = 0

    def setup(self):
        self.setup_calls += 1
        return self.status

    def teardown(self):
        self.teardown_calls += 1


class RaisingReference(RecordingReference):
    """Reference library whose setup raises."""

    def setup(self):
        self.setup_calls += 1
        raise OSError("reference library not found")


class RecordingDeviceProvider:
    """Device provider that hands out a named device and remembers releases."""

    def __init__(self, name="Test GPU"):
        self.name = name
        self.opened = []
        self.released = 0

    def open(self, platform_id, device_id):
        self.opened.append((platform_id, device_id))
        return DeviceContext(self.name, context=object(), queue=object(), release=self._release)

    def _release(self):
        self.released += 1
