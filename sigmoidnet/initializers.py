"""Xavier uniform initialisation of weights and biases."""

from __future__ import annotations

import math
import random


def _uniform(count: int, fan_sum: int, rng: random.Random | None) -> list[float]:
    if count < 0:
        raise ValueError(f"cannot create a vector of negative size {count}")
    if count == 0:
        return []
    limit = math.sqrt(6.0 / fan_sum)
    generator = rng if rng is not None else random.Random()
    return [generator.uniform(-limit, limit) for _ in range(count)]


def xavier_vector(n_in: int, n_out: int, rng: random.Random | None = None) -> list[float]:
    """Return ``n_in * n_out`` values drawn uniformly from the Xavier interval."""
    return _uniform(n_in * n_out, n_in + n_out, rng)


def xavier_bias(
    input_size: int, output_size: int, rng: random.Random | None = None
) -> list[float]:
    """Return ``output_size`` values drawn uniformly from the Xavier interval."""
    return _uniform(output_size, input_size + output_size, rng)