"""Activation functions and their derivatives.

Element-wise functions take a scalar, a vector or a matrix. A scalar gives
back a float, a sequence or array gives back a numpy array of the same
shape. When ``deriv`` is true the derivative is returned instead of the
value. Values outside a function's domain come back as ``nan`` or ``inf``
rather than raising.
"""

from __future__ import annotations

import functools
import math
from typing import Callable, Union

import numpy as np

from mlpp.hyperbolic import sech, tanh

__all__ = [
    "linear",
    "sigmoid",
    "softmax",
    "adj_softmax",
    "softmax_deriv",
    "softplus",
    "softsign",
    "gaussian_cdf",
    "cloglog",
    "logit",
    "unit_step",
    "swish",
    "mish",
    "sinc",
    "relu",
    "leaky_relu",
    "elu",
    "selu",
    "gelu",
    "sign",
    "elementwise",
]

ArrayLike = Union[float, int, list, tuple, np.ndarray]
Result = Union[float, np.ndarray]

_erf = np.vectorize(math.erf, otypes=[float])


def _to_result(out: np.ndarray, scalar: bool) -> Result:
    out = np.asarray(out, dtype=float)
    return float(out) if scalar else out


def _vectorised(func: Callable[..., np.ndarray]) -> Callable[..., Result]:
    """Accept scalars and nested sequences, return a float or an array."""

    @functools.wraps(func)
    def wrapper(z: ArrayLike, *args, **kwargs) -> Result:
        arr = np.asarray(z, dtype=float)
        with np.errstate(all="ignore"):
            out = func(arr, *args, **kwargs)
        return _to_result(out, arr.ndim == 0)

    return wrapper


def _as_distribution_input(z: ArrayLike) -> np.ndarray:
    arr = np.asarray(z, dtype=float)
    if arr.ndim == 0:
        raise ValueError("softmax needs a vector or a matrix, not a scalar")
    if arr.shape[-1] == 0:
        raise ValueError("softmax needs at least one element per row")
    return arr


@_vectorised
def linear(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Identity; its derivative is one everywhere."""
    if deriv:
        return np.ones_like(z)
    return z


@_vectorised
def sigmoid(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Logistic function 1 / (1 + exp(-z))."""
    s = 1.0 / (1.0 + np.exp(-z))
    if deriv:
        return s - s * s
    return s


def softmax(z: ArrayLike) -> np.ndarray:
    """Softmax of a vector, or of every row of a matrix."""
    arr = _as_distribution_input(z)
    with np.errstate(all="ignore"):
        e = np.exp(arr)
        return e / e.sum(axis=-1, keepdims=True)


def adj_softmax(z: ArrayLike) -> np.ndarray:
    """Softmax computed after shifting each row by its maximum."""
    arr = _as_distribution_input(z)
    return softmax(arr - arr.max(axis=-1, keepdims=True))


def softmax_deriv(z: ArrayLike) -> np.ndarray:
    """Jacobian of the softmax.

    For a vector of length n the result is an n-by-n matrix. For a matrix of
    n rows and m columns the result has shape (n, n, m): entry [i][j] is
    a[i] - a[i]**2 when i == j and -a[i] * a[j] otherwise, element-wise.
    """
    a = softmax(z)
    n = a.shape[0]
    idx = np.arange(n)
    if a.ndim == 1:
        deriv = -np.outer(a, a)
    else:
        deriv = -(a[:, None, ...] * a[None, :, ...])
    deriv[idx, idx] += a
    return deriv


@_vectorised
def softplus(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """log(1 + exp(z)); its derivative is the sigmoid."""
    if deriv:
        return sigmoid(z)
    return np.log(1.0 + np.exp(z))


@_vectorised
def softsign(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """z / (1 + |z|)."""
    denom = 1.0 + np.abs(z)
    if deriv:
        return 1.0 / (denom * denom)
    return z / denom


@_vectorised
def gaussian_cdf(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Standard normal cumulative distribution; its derivative is the density."""
    if deriv:
        return (1.0 / math.sqrt(2.0 * math.pi)) * np.exp(-z * z / 2.0)
    return 0.5 * (1.0 + _erf(z / math.sqrt(2.0)))


@_vectorised
def cloglog(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Complementary log-log: 1 - exp(-exp(z))."""
    if deriv:
        return np.exp(z - np.exp(z))
    return 1.0 - np.exp(-np.exp(z))


@_vectorised
def logit(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """log(z / (1 - z)), defined for 0 < z < 1."""
    if deriv:
        return 1.0 / z - 1.0 / (z - 1.0)
    return np.log(z / (1.0 - z))


@_vectorised
def unit_step(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """0 for negative inputs, 1 otherwise; the derivative is taken as 0."""
    if deriv:
        return np.zeros_like(z)
    return np.where(z < 0, 0.0, 1.0)


@_vectorised
def swish(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """z * sigmoid(z)."""
    s = sigmoid(z)
    value = z * s
    if deriv:
        return value + s * (1.0 - value)
    return value


@_vectorised
def mish(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """z * tanh(softplus(z))."""
    sp = softplus(z)
    value = z * tanh(sp)
    if deriv:
        sc = sech(sp)
        return sc * sc * z * sigmoid(z) + value / z
    return value


@_vectorised
def sinc(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """sin(z) / z (unnormalised); undefined at zero."""
    if deriv:
        return (z * np.cos(z) - np.sin(z)) / (z * z)
    return np.sin(z) / z


@_vectorised
def relu(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """max(0, z); the derivative is 0 for z <= 0 and 1 otherwise."""
    if deriv:
        return np.where(z <= 0, 0.0, 1.0)
    return np.fmax(0.0, z)


@_vectorised
def leaky_relu(z: np.ndarray, c: float, deriv: bool = False) -> np.ndarray:
    """max(c * z, z); the derivative is c for z <= 0 and 1 otherwise."""
    if deriv:
        return np.where(z <= 0, c, 1.0)
    return np.fmax(c * z, z)


@_vectorised
def elu(z: np.ndarray, c: float, deriv: bool = False) -> np.ndarray:
    """Exponential linear unit: z for z >= 0, c * (exp(z) - 1) below."""
    if deriv:
        return np.where(z <= 0, c * np.exp(z), 1.0)
    return np.where(z >= 0, z, c * (np.exp(z) - 1.0))


@_vectorised
def selu(z: np.ndarray, lam: float, c: float, deriv: bool = False) -> np.ndarray:
    """lam * elu(z, c); the derivative returned is that of elu(z, c)."""
    if deriv:
        return elu(z, c, True)
    return lam * elu(z, c)


@_vectorised
def gelu(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """Gaussian error linear unit, tanh approximation."""
    if deriv:
        u = 0.0356774 * z**3 + 0.797885 * z
        sc = sech(u)
        return 0.5 * np.tanh(u) + (0.0535161 * z**3 + 0.398942 * z) * sc * sc + 0.5
    return 0.5 * z * (1.0 + np.tanh(math.sqrt(2.0 / math.pi) * (z + 0.044715 * z**3)))


@_vectorised
def sign(z: np.ndarray, deriv: bool = False) -> np.ndarray:
    """-1, 0 or 1 by the sign of z; the derivative is taken as 0."""
    if deriv:
        return np.zeros_like(z)
    return np.sign(z)


def elementwise(
    z: ArrayLike, function: Callable[[float, bool], float], deriv: bool = False
) -> Result:
    """Apply a scalar ``function(x, deriv)`` to every element of ``z``."""
    arr = np.asarray(z, dtype=float)
    out = np.array(
        [function(float(x), bool(deriv)) for x in arr.ravel()], dtype=float
    ).reshape(arr.shape)
    return _to_result(out, arr.ndim == 0)