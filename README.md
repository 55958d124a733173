# sigmoidnet

A small neural network library with no dependencies. Every layer computes
`sigmoid(W · x + b)` and learns by gradient descent on a squared-error loss.
Weights and biases start with values from the Xavier uniform distribution. A
network can be saved to a plain-text model file and loaded back.

## Install

```
pip install .
```

Install the test extra to run the tests:

```
pip install .[test]
pytest
```

## Building and using a network

```python
from sigmoidnet.dense import Dense
from sigmoidnet.layer import Layer
from sigmoidnet.predict import prediction

net = Dense([Layer(97, 64), Layer(64, 64), Layer(64, 1)])
output = prediction(net, [0.0] * 97)   # list with one float in (0, 1)
```

- `Dense.forward(x)` sends a vector through every layer and returns the output.
- `Dense.backward_pass(sample, alpha, input_size, output_size)` fits the network
  to one sample. The sample is a flat list that holds `input_size` input values
  followed by `output_size` target values.
  - The last layer takes a gradient step towards the targets.
  - Each earlier layer takes a step towards the optimised input (`x_opti`) of
    the layer after it.
- `Dense.set_layer(index, input_dim, output_dim)` replaces one layer with a new
  one of the given dimensions. The new layer has fresh random values. A bad
  index raises `IndexError`.
- `Dense.depth` counts the activation levels, input and output included. This
  is the number of layers plus one.
- `prediction(network, values)` raises `ValueError` if the network has no
  layers. It also raises `ValueError` if the size of `values` does not match
  the first layer's `input_dim`.

### Lower-level pieces

- `sigmoidnet.layer.Layer`:
  - `forward(x)` stores the input and returns the layer's output for it.
  - `backward(target, alpha)` does three things:
    - it updates `weight` and `bias` by one gradient step;
    - it stores the optimised input in `x_opti`;
    - it returns `x_opti`.
- `sigmoidnet.matrix.Matrix(rows, cols, data=None)` is a row-major matrix.
  - Without `data` it is filled with Xavier-distributed values.
  - Coefficients are read and written with `m[i, j]`.
  - Arithmetic: `+` adds two matrices. `*` multiplies by a matrix or by a
    vector. `matvec` multiplies by a vector. `scale(alpha)` multiplies every
    coefficient by `alpha`.
  - `str(m)` prints one row per line.
- `sigmoidnet.initializers`: `xavier_vector(n_in, n_out, rng=None)` and
  `xavier_bias(input_size, output_size, rng=None)`. Pass a `random.Random` for
  values you can reproduce.
- `sigmoidnet.csvdata`: `count_lines(path)`, `read_row(path, index)` and
  `count_columns(path)`.
  - `read_row` skips cells that are not numbers.
  - `read_row` returns an empty list when the line does not exist.
- `sigmoidnet.serialization`: `parse_dimensions(line)`,
  `read_matrix(stream, rows, cols)` and `read_vector(stream, expected_size)`.
  These are the parsers behind `Dense.load_weights`.
- `sigmoidnet.ij.IJ(i, j)` is a frozen index pair. It orders by `i`, then by `j`.

## Training on a CSV file

```python
net.train("chess_positions.csv", alpha=1.0, input_size=97, output_size=1, epochs=1)
net.save_weights("Model.txt")
```

The first line of the CSV file is a header. Every later row holds the input
values followed by the target values. The rows are read once. Each epoch then
trains on data rows 1 to 1999, or on fewer rows if the file is shorter. Progress
and the time each epoch takes are printed to standard output.

## Model file format

```
(97, 64, 64, 1)
Layer : 0
Mat :
<one line per matrix row, values separated by spaces>

Biais :
<bias values separated by spaces>
Layer : 1
...
```

The first line lists the network's dimensions. A block follows for each layer.

- `Dense.save_weights(path)` writes this format. It raises `ValueError` for an
  empty network.
- `Dense.load_weights(path)` reads it back. It rebuilds the layers from the
  dimension line. A malformed file raises `ValueError`.

## Command line

```
sigmoidnet [--model Model.txt] [--data chess_positions.csv] [--rows 20]
```

The command first loads the model file. It then goes through the first `--rows`
data rows of the CSV file. For each row it prints:

- the target value, which is the last column;
- the network's prediction, scaled by 100.

A missing file, a malformed model or a row that is too short stops the command.
It then prints a message to standard error and exits with status 1.

## What it does not do

- The command only predicts. Training and saving are done from Python with
  `Dense.train` and `Dense.save_weights`.
- The package does not turn a chess position into an input vector. The CSV rows
  must already hold the encoded inputs.