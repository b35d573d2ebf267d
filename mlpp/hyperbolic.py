"""Hyperbolic and inverse hyperbolic activation functions.

Every function takes a scalar, a vector or a matrix. A scalar gives back a
float; a sequence or array gives back a numpy array of the same shape.
When ``deriv`` is true the derivative is returned instead of the value.
Values outside a function's domain come back as ``nan`` or ``inf`` rather
than raising.
"""

from __future__ import annotations

import functools
from typing import Callable, Union

import numpy as np

__all__ = [
    "sinh",
    "cosh",
    "tanh",
    "csch",
    "sech",
    "coth",
    "arsinh",
    "arcosh",
    "artanh",
    "arcsch",
    "arsech",
    "arcoth",
]

ArrayLike = Union[float, int, list, tuple, np.ndarray]
Result = Union[float, np.ndarray]


def _elementwise(func: Callable[[np.ndarray, bool], np.ndarray]) -> Callable[..., Result]:
    """Accept scalars and nested sequences, return a float or an array."""

    @functools.wraps(func)
    def wrapper(z: ArrayLike, deriv: bool = False) -> Result:
        arr = np.asarray(z, dtype=float)
        with np.errstate(all="ignore"):
            out = np.asarray(func(arr, bool(deriv)), dtype=float)
        return float(out) if arr.ndim == 0 else out

    return wrapper


@_elementwise
def sinh(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Hyperbolic sine; its derivative is cosh."""
    if deriv:
        return cosh(z)
    return 0.5 * (np.exp(z) - np.exp(-z))


@_elementwise
def cosh(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Hyperbolic cosine; its derivative is sinh."""
    if deriv:
        return sinh(z)
    return 0.5 * (np.exp(z) + np.exp(-z))


@_elementwise
def tanh(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Hyperbolic tangent; its derivative is 1 - tanh(z)**2."""
    if deriv:
        t = tanh(z)
        return 1.0 - t * t
    return np.tanh(z)


@_elementwise
def csch(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Hyperbolic cosecant; its derivative is -csch(z) * coth(z)."""
    if deriv:
        return -csch(z) * coth(z)
    return 1.0 / sinh(z)


@_elementwise
def sech(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Hyperbolic secant; its derivative is -sech(z) * tanh(z)."""
    if deriv:
        return -sech(z) * tanh(z)
    return 1.0 / cosh(z)


@_elementwise
def coth(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Hyperbolic cotangent; its derivative is -csch(z)**2."""
    if deriv:
        c = csch(z)
        return -c * c
    return 1.0 / tanh(z)


@_elementwise
def arsinh(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Inverse hyperbolic sine."""
    if deriv:
        return 1.0 / np.sqrt(z * z + 1.0)
    return np.log(z + np.sqrt(z * z + 1.0))


@_elementwise
def arcosh(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Inverse hyperbolic cosine, defined for z >= 1."""
    if deriv:
        return 1.0 / np.sqrt(z * z - 1.0)
    return np.log(z + np.sqrt(z * z - 1.0))


@_elementwise
def artanh(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Inverse hyperbolic tangent, defined for |z| < 1."""
    if deriv:
        return 1.0 / (1.0 - z * z)
    return 0.5 * np.log((1.0 + z) / (1.0 - z))


@_elementwise
def arcsch(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Inverse hyperbolic cosecant."""
    if deriv:
        return -1.0 / ((z * z) * np.sqrt(1.0 + 1.0 / (z * z)))
    return np.log(np.sqrt(1.0 + 1.0 / (z * z)) + 1.0 / z)


@_elementwise
def arsech(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Inverse hyperbolic secant activation.

    The value is log(1/z + (1/z + 1) * (1/z - 1)); the derivative is
    -1 / (z * sqrt(1 - z**2)).
    """
    if deriv:
        return -1.0 / (z * np.sqrt(1.0 - z * z))
    inv = 1.0 / z
    return np.log(inv + (inv + 1.0) * (inv - 1.0))


@_elementwise
def arcoth(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Inverse hyperbolic cotangent, defined for |z| > 1."""
    if deriv:
        return 1.0 / (1.0 - z * z)
    return 0.5 * np.log((1.0 + z) / (z - 1.0))