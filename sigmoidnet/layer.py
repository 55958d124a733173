"""A fully connected layer with sigmoid activation."""

from __future__ import annotations

import math
from collections.abc import Iterable

from sigmoidnet.initializers import xavier_bias
from sigmoidnet.matrix import Matrix


def _sigmoid(z: float) -> float:
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    e = math.exp(z)
    return e / (1.0 + e)


class Layer:
    """Computes ``sigmoid(W x + b)`` and learns by gradient descent on squared error."""

    def __init__(self, input_dim: int = 0, output_dim: int = 0):
        self.input_dim = input_dim
        self.output_dim = output_dim
        self.weight = Matrix(output_dim, input_dim)
        self.bias = xavier_bias(input_dim, output_dim)
        self.activation = xavier_bias(output_dim, input_dim)
        self.z: list[float] = []
        self.x_opti: list[float] = []

    def _pre_activation(self) -> list[float]:
        return [s + b for s, b in zip(self.weight.matvec(self.activation), self.bias)]

    def forward(self, x: Iterable[float]) -> list[float]:
        """Store the input and return the layer's output for it."""
        self.activation = list(x)
        self.z = self._pre_activation()
        return [_sigmoid(v) for v in self.z]

    def backward(self, target: Iterable[float], alpha: float) -> list[float]:
        """Take one gradient step towards ``target`` for the stored input.

        Updates weights and bias, stores and returns the optimised input ``x_opti``.
        """
        target = list(target)
        if len(target) != self.output_dim:
            raise ValueError(
                f"target has size {len(target)}, expected {self.output_dim}"
            )
        x = self.activation
        if len(x) != self.input_dim:
            raise ValueError(f"activation has size {len(x)}, expected {self.input_dim}")

        self.z = self._pre_activation()
        deltas = []
        for z, t in zip(self.z, target):
            s = _sigmoid(z)
            deltas.append(2.0 * (s - t) * (s * (1 - s)))

        grad_activation = [
            sum(delta * self.weight[i, j] for i, delta in enumerate(deltas))
            for j in range(self.input_dim)
        ]

        for i, delta in enumerate(deltas):
            self.bias[i] -= alpha * delta
            for j, xj in enumerate(x):
                self.weight[i, j] -= alpha * (delta * xj)

        self.x_opti = [xj - alpha * g for xj, g in zip(x, grad_activation)]
        return self.x_opti