"""A feed-forward network of sigmoid layers."""

from __future__ import annotations

import os
import time
from collections.abc import Iterable
from typing import TextIO

from sigmoidnet.csvdata import count_lines, read_row
from sigmoidnet.layer import Layer
from sigmoidnet.serialization import parse_dimensions, read_matrix, read_vector

_ROW_LIMIT = 2000


def _expect(stream: TextIO, text: str, *, skip_blank: bool = False) -> None:
    line = stream.readline()
    while skip_blank and line != "" and line.strip() == "":
        line = stream.readline()
    if line.rstrip("\n") != text:
        raise ValueError(f"expected {text!r}, got {line.rstrip(chr(10))!r}")


class Dense:
    """A chain of fully connected layers; the output level counts as a level of its own."""

    def __init__(self, layers: Iterable[Layer] | None = None):
        self.layers: list[Layer] = list(layers) if layers is not None else []

    @property
    def depth(self) -> int:
        """Number of activation levels, input and output included."""
        return len(self.layers) + 1

    def forward(self, x: Iterable[float]) -> list[float]:
        """Propagate an input through every layer and return the output."""
        activation = list(x)
        for layer in self.layers:
            activation = layer.forward(activation)
        return activation

    def backward_pass(
        self, sample: Iterable[float], alpha: float, input_size: int, output_size: int
    ) -> None:
        """Adjust the network towards one sample made of inputs followed by targets."""
        sample = list(sample)
        if not self.layers:
            raise ValueError("cannot train an empty network")
        if len(sample) != input_size + output_size:
            raise ValueError(
                f"sample has {len(sample)} values, expected {input_size + output_size}"
            )
        x, target = sample[:input_size], sample[input_size:]
        self.forward(x)
        self.layers[-1].backward(target, alpha)
        pairs = zip(reversed(self.layers[:-1]), reversed(self.layers[1:]))
        for position, (layer, following) in zip(range(len(self.layers) - 2, -1, -1), pairs):
            wanted = following.x_opti
            if len(wanted) != layer.output_dim:
                raise ValueError(
                    f"layer {position} expects a target of size {layer.output_dim}, "
                    f"got {len(wanted)}"
                )
            layer.backward(wanted, alpha)

    def set_layer(self, index: int, input_dim: int, output_dim: int) -> None:
        """Replace the layer at ``index`` with a fresh one of the given dimensions."""
        if not 0 <= index < len(self.layers):
            raise IndexError(f"invalid layer index {index}")
        self.layers[index] = Layer(input_dim, output_dim)

    def save_weights(self, path: str | os.PathLike[str]) -> None:
        """Write dimensions, weights and biases to a text file."""
        if not self.layers:
            raise ValueError("empty network, nothing to save")
        dims = [self.layers[0].input_dim, *(layer.output_dim for layer in self.layers)]
        with open(path, "w", encoding="utf-8") as out:
            out.write("(" + ", ".join(str(d) for d in dims) + ")\n")
            for index, layer in enumerate(self.layers):
                out.write(f"Layer : {index}\n")
                out.write("Mat :\n")
                out.write(f"{layer.weight}\n")
                out.write("Biais :\n")
                out.write(" ".join(f"{b:g}" for b in layer.bias) + "\n")

    def load_weights(self, path: str | os.PathLike[str]) -> None:
        """Replace the network with the one stored in a text file."""
        with open(path, encoding="utf-8") as stream:
            header = stream.readline()
            if not header:
                raise ValueError("missing dimensions line")
            dims = parse_dimensions(header.rstrip("\n"))
            if len(dims) < 2:
                raise ValueError("not enough dimensions for a network")
            layers = [Layer(a, b) for a, b in zip(dims, dims[1:])]
            for index, layer in enumerate(layers):
                _expect(stream, f"Layer : {index}")
                _expect(stream, "Mat :")
                layer.weight = read_matrix(stream, layer.output_dim, layer.input_dim)
                _expect(stream, "Biais :", skip_blank=True)
                layer.bias = read_vector(stream, layer.output_dim)
        self.layers = layers
        print(f"Network loaded with {len(dims)} layers.")

    def train(
        self,
        database: str | os.PathLike[str],
        alpha: float,
        input_size: int,
        output_size: int,
        epochs: int,
    ) -> None:
        """Run gradient descent over the rows of a CSV file with a header line."""
        total = count_lines(database) - 1
        print(f"Training on {total} samples:")
        samples = [read_row(database, n) for n in range(1, min(_ROW_LIMIT, total + 1))]
        for epoch in range(epochs):
            start = time.perf_counter()
            print(f"epoch : {epoch}")
            for sample in samples:
                self.backward_pass(sample, alpha, input_size, output_size)
            print(f"Elapsed time: {time.perf_counter() - start} seconds")
        print("Training complete")