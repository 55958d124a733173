"""Running a trained network on an input vector."""

from __future__ import annotations

from collections.abc import Iterable

from sigmoidnet.dense import Dense


def prediction(network: Dense, values: Iterable[float]) -> list[float]:
    """Return the network's output for ``values``, whose size must match its input."""
    values = list(values)
    if not network.layers:
        raise ValueError("the network has no layers")
    expected = network.layers[0].input_dim
    if expected != len(values):
        raise ValueError(
            f"network input dimension {expected} does not match input size {len(values)}"
        )
    return network.forward(values)