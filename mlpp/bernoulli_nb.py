"""Bernoulli naive Bayes over a vocabulary of observed values."""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["BernoulliNB"]


class BernoulliNB:
    """Two-class naive Bayes where each input row is a bag of tokens.

    The vocabulary is the set of all values seen in the training inputs.
    For every class, theta gives the share of that class's examples in which
    each vocabulary token occurs (counted per occurrence). Outputs must be
    0 or 1.
    """

    def __init__(self, inputs: Sequence[Sequence[float]], outputs: Sequence[float]) -> None:
        self.inputs = np.asarray(inputs, dtype=float)
        self.outputs = np.asarray(outputs, dtype=float)
        if self.inputs.ndim != 2 or self.inputs.shape[0] == 0:
            raise ValueError("inputs must be a non-empty matrix")
        if self.outputs.shape != (self.inputs.shape[0],):
            raise ValueError("outputs must hold one label per input row")
        if not np.all(np.isin(self.outputs, (0.0, 1.0))):
            raise ValueError("outputs must be 0 or 1")

        n = self.outputs.size
        self.prior_1 = float(np.sum(self.outputs == 1)) / n
        self.prior_0 = 1.0 - self.prior_1
        self.vocab = sorted(set(self.inputs.ravel().tolist()))
        self.theta = self._compute_theta()
        self.y_hat = self.predict_many(self.inputs)

    def _compute_theta(self) -> list[dict[float, float]]:
        theta: list[dict[float, float]] = [dict.fromkeys(self.vocab, 0.0) for _ in range(2)]
        for row, label in zip(self.inputs, self.outputs):
            counts = theta[int(label)]
            for value in row.tolist():
                counts[value] += 1.0
        n = self.outputs.size
        for cls, prior in ((0, self.prior_0), (1, self.prior_1)):
            total = prior * n
            for value in theta[cls]:
                theta[cls][value] = theta[cls][value] / total if total else 0.0
        return theta

    def predict(self, x: Sequence[float]) -> float:
        """Class 0 or 1 for one row; ties go to class 1."""
        score_0 = 1.0
        score_1 = 1.0
        present = set()
        vocab = set(self.vocab)
        for value in np.asarray(x, dtype=float).ravel().tolist():
            if value in vocab:
                score_0 *= self.theta[0][value]
                score_1 *= self.theta[1][value]
                present.add(value)
        for value in self.vocab:
            if value not in present:
                score_0 *= 1.0 - self.theta[0][value]
                score_1 *= 1.0 - self.theta[1][value]
        score_0 *= self.prior_0
        score_1 *= self.prior_1
        return 0.0 if score_0 > score_1 else 1.0

    def predict_many(self, X: Sequence[Sequence[float]]) -> np.ndarray:
        """Predicted class for every row of ``X``."""
        return np.array([self.predict(row) for row in X], dtype=float)

    def score(self) -> float:
        """Fraction of training rows classified correctly."""
        return float(np.mean(np.round(self.y_hat) == self.outputs))