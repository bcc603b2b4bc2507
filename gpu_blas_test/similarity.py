# Copyright (c) 2025 Alessandro Baretta
# All rights reserved.

"""
Similarity comparison of reference and candidate results

A value pair is similar when it is exactly equal, when its absolute
difference is below margin * tiny near zero, or when its relative difference
is below margin elsewhere. tiny is the smallest positive normal value of the
operand type. Complex values are similar when both components are.
NumPy scalars keep their own precision, so both operands must be of the same
NumPy type; Python numbers are compared in double precision.
"""

from functools import singledispatch

import numpy as np


def _is_similar_real(a, b, margin: float) -> bool:
    """Compare two real scalars of the same type; arithmetic stays in that type."""
    if a == b:
        return True
    tiny = np.finfo(type(a)).tiny
    margin = type(a)(margin)
    with np.errstate(over="ignore", invalid="ignore"):
        difference = abs(a - b)
        if a == 0 or b == 0 or difference < tiny:
            return bool(difference < margin * tiny)
        return bool(difference / (abs(a) + abs(b)) < margin)


@singledispatch
def is_similar(a, b, margin: float) -> bool:
    """Whether a and b are within the error margin of each other."""
    raise TypeError(f"Cannot compare values of type {type(a).__name__}")


@is_similar.register(int)
@is_similar.register(float)
def _(a, b, margin: float) -> bool:
    return _is_similar_real(np.float64(a), np.float64(b), margin)


def _check_same_precision(a, b) -> None:
    if isinstance(b, np.generic) and type(b) is not type(a):
        raise TypeError(f"Cannot compare {type(a).__name__} with {type(b).__name__}")


@is_similar.register(np.floating)
def _(a, b, margin: float) -> bool:
    _check_same_precision(a, b)
    return _is_similar_real(a, type(a)(b), margin)


@is_similar.register(complex)
def _(a, b, margin: float) -> bool:
    b = complex(b)
    real = _is_similar_real(np.float64(a.real), np.float64(b.real), margin)
    imag = _is_similar_real(np.float64(a.imag), np.float64(b.imag), margin)
    return real and imag


@is_similar.register(np.complexfloating)
def _(a, b, margin: float) -> bool:
    _check_same_precision(a, b)
    b = type(a)(b)
    real = _is_similar_real(a.real, b.real, margin)
    imag = _is_similar_real(a.imag, b.imag, margin)
    return real and imag


def _similar_mask_real(a: np.ndarray, b: np.ndarray, margin: float) -> np.ndarray:
    tiny = np.finfo(a.dtype).tiny
    margin = a.dtype.type(margin)
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        difference = np.abs(a - b)
        exact = a == b
        near_zero = (a == 0) | (b == 0) | (difference < tiny)
        absolute = difference < margin * tiny
        relative = difference / (np.abs(a) + np.abs(b)) < margin
    return exact | (near_zero & absolute) | (~near_zero & relative)


def similar_mask(expected: np.ndarray, found: np.ndarray, margin: float) -> np.ndarray:
    """Element-wise is_similar over two arrays of the same shape.

    found is converted to the dtype of expected before comparing.
    """
    expected = np.asarray(expected)
    found = np.asarray(found, dtype=expected.dtype)
    if expected.shape != found.shape:
        raise ValueError(f"Shapes do not match: {expected.shape} != {found.shape}")
    if not np.issubdtype(expected.dtype, np.inexact):
        raise ValueError(f"Unsupported dtype {expected.dtype}")

    if np.issubdtype(expected.dtype, np.complexfloating):
        real = _similar_mask_real(expected.real, found.real, margin)
        imag = _similar_mask_real(expected.imag, found.imag, margin)
        return real & imag
    return _similar_mask_real(expected, found, margin)


def count_errors(expected: np.ndarray, found: np.ndarray, margin: float) -> int:
    """Number of elements of found that are not similar to expected."""
    return int(np.count_nonzero(~similar_mask(expected, found, margin)))
