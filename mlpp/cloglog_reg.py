"""Complementary log-log regression trained by gradient methods."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Union

import numpy as np

from mlpp.activation import cloglog

__all__ = ["CLogLogReg"]

_REGULARIZATIONS = ("None", "Ridge", "Lasso", "ElasticNet", "WeightClipping")

RandomSource = Union[None, int, np.random.Generator]


def _epochs(max_epoch: int) -> range:
    """Epoch numbers from 1; the first epoch always runs."""
    return range(1, max(int(max_epoch), 1) + 1)


class CLogLogReg:
    """Binary regression with the link y = 1 - exp(-exp(w.x + b)).

    ``reg`` is one of "None", "Ridge", "Lasso", "ElasticNet" or
    "WeightClipping"; ``lam`` and ``alpha`` are its parameters (for weight
    clipping they are the lower and upper bounds).
    """

    def __init__(
        self,
        inputs: Sequence[Sequence[float]],
        outputs: Sequence[float],
        reg: str = "None",
        lam: float = 0.5,
        alpha: float = 0.5,
        rng: RandomSource = None,
    ) -> None:
        self.inputs = np.asarray(inputs, dtype=float)
        self.outputs = np.asarray(outputs, dtype=float)
        if self.inputs.ndim != 2 or self.inputs.shape[0] == 0 or self.inputs.shape[1] == 0:
            raise ValueError("inputs must be a non-empty matrix")
        if self.outputs.shape != (self.inputs.shape[0],):
            raise ValueError("outputs must hold one value per input row")
        if reg not in _REGULARIZATIONS:
            raise ValueError(f"unknown regularization {reg!r}")
        self.reg = reg
        self.lam = float(lam)
        self.alpha = float(alpha)
        self._rng = np.random.default_rng(rng)
        self.n, self.k = self.inputs.shape
        self.weights = self._rng.uniform(0.0, 1.0, self.k)
        self.bias = float(self._rng.uniform(0.0, 1.0))
        self.z = np.zeros(self.n)
        self.y_hat = np.zeros(self.n)

    # ----- prediction -------------------------------------------------

    def predict_many(self, X: Sequence[Sequence[float]]) -> np.ndarray:
        """Predicted values for every row of ``X``."""
        return cloglog(self._propagate(np.asarray(X, dtype=float)))

    def predict(self, x: Sequence[float]) -> float:
        """Predicted value for one input vector."""
        return float(cloglog(float(np.dot(self.weights, np.asarray(x, dtype=float)) + self.bias)))

    def _propagate(self, X: np.ndarray) -> np.ndarray:
        return X @ self.weights + self.bias

    def _forward(self) -> None:
        self.z = self._propagate(self.inputs)
        self.y_hat = cloglog(self.z)

    # ----- regularization and cost ------------------------------------

    def _reg_term(self) -> float:
        w = self.weights
        if self.reg == "Ridge":
            return self.lam / 2 * float(np.sum(w * w))
        if self.reg == "Lasso":
            return self.lam * float(np.sum(np.abs(w)))
        if self.reg == "ElasticNet":
            return (
                self.alpha * self.lam * float(np.sum(np.abs(w)))
                + (1 - self.alpha) * self.lam / 2 * float(np.sum(w * w))
            )
        return 0.0

    def _reg_weights(self, w: np.ndarray) -> np.ndarray:
        if self.reg == "WeightClipping":
            return np.where(w > self.alpha, self.alpha, np.where(w < self.lam, self.lam, w))
        if self.reg == "Ridge":
            return w - self.lam * w
        if self.reg == "Lasso":
            return w - self.lam * np.sign(w)
        if self.reg == "ElasticNet":
            return w - (self.alpha * self.lam * np.sign(w) + (1 - self.alpha) * self.lam * w)
        return w

    def _cost(self, y_hat: np.ndarray, y: np.ndarray) -> float:
        diff = np.asarray(y_hat, dtype=float) - np.asarray(y, dtype=float)
        return float(np.sum(diff * diff)) / (2 * diff.size) + self._reg_term()

    def _report(self, epoch: int, cost_prev: float, cost: float) -> None:
        print(f"Epoch {epoch}: cost {cost_prev} -> {cost}")
        print(f"Weights: {self.weights.tolist()}")
        print(f"Bias: {self.bias}")

    # ----- training ---------------------------------------------------

    def _batch_step(self, X: np.ndarray, y: np.ndarray, learning_rate: float, ascend: bool) -> None:
        z = self._propagate(X)
        error = cloglog(z) - y
        grad = error * cloglog(z, True)
        step = learning_rate / self.n
        sign = 1.0 if ascend else -1.0
        self.weights = self.weights + sign * step * (X.T @ grad)
        self.weights = self._reg_weights(self.weights)
        self.bias += sign * learning_rate * float(np.sum(grad)) / self.n

    def gradient_descent(self, learning_rate: float, max_epoch: int, ui: bool = True) -> None:
        """Full-batch gradient descent on the squared error."""
        self._forward()
        for epoch in _epochs(max_epoch):
            cost_prev = self._cost(self.y_hat, self.outputs)
            self._batch_step(self.inputs, self.outputs, learning_rate, ascend=False)
            self._forward()
            if ui:
                self._report(epoch, cost_prev, self._cost(self.y_hat, self.outputs))

    def mle(self, learning_rate: float, max_epoch: int, ui: bool = True) -> None:
        """Full-batch updates that step along the gradient instead of against it."""
        self._forward()
        for epoch in _epochs(max_epoch):
            cost_prev = self._cost(self.y_hat, self.outputs)
            self._batch_step(self.inputs, self.outputs, learning_rate, ascend=True)
            self._forward()
            if ui:
                self._report(epoch, cost_prev, self._cost(self.y_hat, self.outputs))

    def sgd(self, learning_rate: float, max_epoch: int, ui: bool = True) -> None:
        """Stochastic gradient descent, one random example per epoch."""
        self._forward()
        for epoch in _epochs(max_epoch):
            index = int(self._rng.integers(0, self.n))
            x = self.inputs[index]
            y = self.outputs[index]
            z = float(np.dot(self.weights, x) + self.bias)
            y_hat = float(cloglog(z))
            cost_prev = self._cost([y_hat], [y])
            scale = learning_rate * (y_hat - y) * np.exp(z - np.exp(z))
            self.weights = self._reg_weights(self.weights - scale * x)
            self.bias -= float(scale)
            if ui:
                self._report(epoch, cost_prev, self._cost([self.predict(x)], [y]))
        self._forward()

    def _mini_batches(self, count: int) -> Iterator[tuple[np.ndarray, np.ndarray]]:
        size = self.n // count
        for i in range(count):
            stop = self.n if i == count - 1 else (i + 1) * size
            yield self.inputs[i * size : stop], self.outputs[i * size : stop]

    def mbgd(self, learning_rate: float, max_epoch: int, mini_batch_size: int, ui: bool = True) -> None:
        """Mini-batch gradient descent over consecutive batches."""
        if mini_batch_size < 1 or mini_batch_size > self.n:
            raise ValueError("mini_batch_size must be between 1 and the number of examples")
        batches = list(self._mini_batches(self.n // mini_batch_size))
        for epoch in _epochs(max_epoch):
            for X, y in batches:
                cost_prev = self._cost(self.predict_many(X), y)
                self._batch_step(X, y, learning_rate, ascend=False)
                self._forward()
                if ui:
                    self._report(epoch, cost_prev, self._cost(self.predict_many(X), y))
        self._forward()

    def score(self) -> float:
        """Fraction of training examples whose rounded prediction is exact."""
        return float(np.mean(np.round(self.y_hat) == self.outputs))