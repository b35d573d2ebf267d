"""A single-hidden-layer autoencoder with a sigmoid bottleneck."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

import numpy as np

from mlpp.activation import sigmoid

__all__ = ["AutoEncoder"]

RandomSource = Union[None, int, np.random.Generator]


def _epochs(max_epoch: int) -> range:
    """Epoch numbers from 1; the first epoch always runs."""
    return range(1, max(int(max_epoch), 1) + 1)


class AutoEncoder:
    """Reconstructs its inputs through ``n_hidden`` sigmoid units.

    The encoder is z2 = X @ weights1 + bias1, a2 = sigmoid(z2); the decoder
    is a linear layer a2 @ weights2 + bias2. Training minimises the squared
    reconstruction error.
    """

    def __init__(
        self,
        inputs: Sequence[Sequence[float]],
        n_hidden: int,
        rng: RandomSource = None,
    ) -> None:
        self.inputs = np.asarray(inputs, dtype=float)
        if self.inputs.ndim != 2 or self.inputs.shape[0] == 0 or self.inputs.shape[1] == 0:
            raise ValueError("inputs must be a non-empty matrix")
        if int(n_hidden) < 1:
            raise ValueError("n_hidden must be at least 1")
        self.n_hidden = int(n_hidden)
        self.n, self.k = self.inputs.shape
        self._rng = np.random.default_rng(rng)
        self.weights1 = self._rng.uniform(0.0, 1.0, (self.k, self.n_hidden))
        self.weights2 = self._rng.uniform(0.0, 1.0, (self.n_hidden, self.k))
        self.bias1 = self._rng.uniform(0.0, 1.0, self.n_hidden)
        self.bias2 = self._rng.uniform(0.0, 1.0, self.k)
        self.z2: Optional[np.ndarray] = None
        self.a2: Optional[np.ndarray] = None
        self.y_hat: Optional[np.ndarray] = None

    # ----- evaluation -------------------------------------------------

    def _propagate(self, X: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        z2 = X @ self.weights1 + self.bias1
        return z2, sigmoid(z2)

    def _decode(self, a2: np.ndarray) -> np.ndarray:
        return a2 @ self.weights2 + self.bias2

    def predict_many(self, X: Sequence[Sequence[float]]) -> np.ndarray:
        """Reconstruction of every row of ``X``."""
        arr = np.asarray(X, dtype=float)
        _, a2 = self._propagate(arr)
        return self._decode(a2)

    def predict(self, x: Sequence[float]) -> np.ndarray:
        """Reconstruction of one input vector."""
        vec = np.asarray(x, dtype=float)
        _, a2 = self._propagate(vec)
        return self._decode(a2)

    def _forward(self) -> None:
        self.z2, self.a2 = self._propagate(self.inputs)
        self.y_hat = self._decode(self.a2)

    # ----- cost and reporting -----------------------------------------

    @staticmethod
    def _cost(y_hat: np.ndarray, y: np.ndarray) -> float:
        diff = np.atleast_2d(np.asarray(y_hat, dtype=float) - np.asarray(y, dtype=float))
        return float(np.sum(diff * diff)) / (2 * diff.shape[0])

    def _report(self, epoch: int, cost_prev: float, cost: float) -> None:
        print(f"Epoch {epoch}: cost {cost_prev} -> {cost}")
        for layer, (weights, bias) in enumerate(
            ((self.weights1, self.bias1), (self.weights2, self.bias2)), start=1
        ):
            print(f"Layer {layer}:")
            print(f"Weights: {weights.tolist()}")
            print(f"Bias: {bias.tolist()}")

    # ----- training ---------------------------------------------------

    def _batch_step(self, X: np.ndarray, learning_rate: float, scale: float) -> None:
        z2, a2 = self._propagate(X)
        error = self._decode(a2) - X

        self.weights2 = self.weights2 - learning_rate / scale * (a2.T @ error)
        self.bias2 = self.bias2 - learning_rate * error.sum(axis=0)

        d1 = (error @ self.weights2.T) * sigmoid(z2, True)
        self.weights1 = self.weights1 - learning_rate / scale * (X.T @ d1)
        self.bias1 = self.bias1 - learning_rate / scale * d1.sum(axis=0)

    def gradient_descent(self, learning_rate: float, max_epoch: int, ui: bool = True) -> None:
        """Full-batch gradient descent on the reconstruction error."""
        self._forward()
        for epoch in _epochs(max_epoch):
            cost_prev = self._cost(self.y_hat, self.inputs)
            self._batch_step(self.inputs, learning_rate, self.n)
            self._forward()
            if ui:
                self._report(epoch, cost_prev, self._cost(self.y_hat, self.inputs))

    def sgd(self, learning_rate: float, max_epoch: int, ui: bool = True) -> None:
        """Stochastic gradient descent, one random example per epoch."""
        for epoch in _epochs(max_epoch):
            index = int(self._rng.integers(0, self.n))
            x = self.inputs[index]
            z2, a2 = self._propagate(x)
            y_hat = self._decode(a2)
            cost_prev = self._cost(y_hat, x)
            error = y_hat - x

            self.weights2 = self.weights2 - learning_rate * np.outer(a2, error)
            self.bias2 = self.bias2 - learning_rate * error

            d1 = (self.weights2 @ error) * sigmoid(z2, True)
            self.weights1 = self.weights1 - learning_rate * np.outer(x, d1)
            self.bias1 = self.bias1 - learning_rate * d1

            if ui:
                self._report(epoch, cost_prev, self._cost(self.predict(x), x))
        self._forward()

    def _mini_batches(self, count: int) -> Iterator[np.ndarray]:
        size = self.n // count
        for i in range(count):
            stop = self.n if i == count - 1 else (i + 1) * size
            yield self.inputs[i * size : stop]

    def mbgd(self, learning_rate: float, max_epoch: int, mini_batch_size: int, ui: bool = True) -> None:
        """Mini-batch gradient descent over consecutive batches."""
        if mini_batch_size < 1 or mini_batch_size > self.n:
            raise ValueError("mini_batch_size must be between 1 and the number of examples")
        batches = list(self._mini_batches(self.n // mini_batch_size))
        for epoch in _epochs(max_epoch):
            for X in batches:
                cost_prev = self._cost(self.predict_many(X), X)
                self._batch_step(X, learning_rate, X.shape[0])
                if ui:
                    self._report(epoch, cost_prev, self._cost(self.predict_many(X), X))
        self._forward()

    # ----- results ----------------------------------------------------

    def score(self) -> float:
        """Fraction of training rows whose rounded reconstruction is exact.

        Before any training has run there is no reconstruction, and the
        score is 0.
        """
        if self.y_hat is None:
            return 0.0
        matches = np.all(np.round(self.y_hat) == self.inputs, axis=1)
        return float(np.mean(matches))

    def save(self, file_name: Union[str, Path]) -> None:
        """Write both layers' weights and biases to a text file."""
        lines: list[str] = []
        for layer, (weights, bias) in enumerate(
            ((self.weights1, self.bias1), (self.weights2, self.bias2)), start=1
        ):
            lines.append(f"Layer {layer}")
            lines.append("Weights:")
            lines.extend(" ".join(repr(float(v)) for v in row) for row in weights)
            lines.append("Bias:")
            lines.append(" ".join(repr(float(v)) for v in bias))
        Path(file_name).write_text("\n".join(lines) + "\n", encoding="utf-8")