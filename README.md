# mlpp

A small machine-learning toolkit built on NumPy.

## What is in it

- `mlpp.activation`: activation functions and their derivatives:
  `linear`, `sigmoid`, `softmax`, `adj_softmax`, `softmax_deriv`,
  `softplus`, `softsign`, `gaussian_cdf`, `cloglog`, `logit`, `unit_step`,
  `swish`, `mish`, `sinc`, `relu`, `leaky_relu(z, c)`, `elu(z, c)`,
  `selu(z, lam, c)`, `gelu` and `sign`. `elementwise(z, function, deriv)`
  applies any scalar `function(x, deriv)` to every element of `z`.
- `mlpp.hyperbolic`: `sinh`, `cosh`, `tanh`, `csch`, `sech`, `coth` and
  their inverses `arsinh`, `arcosh`, `artanh`, `arcsch`, `arsech`, `arcoth`.
- `mlpp.convolutions`: `convolve` (2-D, or multi-channel with a stack of
  kernels), `pool` and `global_pool` (`"Average"`, `"Min"`, otherwise
  maximum; see `PoolKind`), `gaussian_2d`, `gaussian_filter_2d`, the image
  differences `dx` and `dy`, `grad_magnitude`, `grad_orientation`,
  `compute_m` and `harris_corner_detection`. The constants
  `PREWITT_HORIZONTAL`, `PREWITT_VERTICAL`, `SOBEL_HORIZONTAL`,
  `SOBEL_VERTICAL`, `SCHARR_HORIZONTAL`, `SCHARR_VERTICAL`,
  `ROBERTS_HORIZONTAL` and `ROBERTS_VERTICAL` hold the usual edge kernels.
- `mlpp.cloglog_reg.CLogLogReg`: binary regression with the link
  `1 - exp(-exp(w.x + b))`. It trains with `gradient_descent`, `mle`, `sgd`
  or `mbgd`, with optional regularization `"Ridge"`, `"Lasso"`,
  `"ElasticNet"` or `"WeightClipping"`.
- `mlpp.bernoulli_nb.BernoulliNB`: a two-class Bernoulli naive Bayes
  classifier. It is fitted when it is built, and labels must be 0 or 1.
- `mlpp.autoencoder.AutoEncoder`: an autoencoder with one sigmoid hidden
  layer and a linear output layer. It trains with `gradient_descent`, `sgd`
  or `mbgd`, and `save(file_name)` writes its weights and biases to a text file.

## Installation

```
pip install .
```

## Examples

Activation functions take a scalar, a vector or a matrix. A scalar gives a
float back and anything else gives a NumPy array. Pass `deriv=True` to get
the derivative:

```python
from mlpp.activation import sigmoid, softmax

sigmoid(0.0)                       # 0.5
sigmoid([0.0, 1.0], deriv=True)
softmax([1.0, 2.0, 3.0])
```

Image operations:

```python
from mlpp.convolutions import convolve, pool, harris_corner_detection

image = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
convolve(image, [[1, 0], [0, -1]], stride=1)
pool(image, size=2, stride=1, kind="Max")
harris_corner_detection(image)  # grid of "C" (corner), "E" (edge), "N" (neither)
```

Models take an optional `rng` (a seed or a `numpy.random.Generator`) that is
used to set their starting weights and to pick examples in `sgd`. Training
methods print progress after each step unless `ui=False` is passed:

```python
import numpy as np
from mlpp.cloglog_reg import CLogLogReg

X = [[0.1, 0.2], [0.4, 0.1], [0.8, 0.9], [0.9, 0.7]]
y = [0, 0, 1, 1]
model = CLogLogReg(X, y, rng=np.random.default_rng(0))
model.gradient_descent(learning_rate=0.1, max_epoch=100, ui=False)
model.predict([0.5, 0.5])
model.score()
```

```python
from mlpp.autoencoder import AutoEncoder

encoder = AutoEncoder([[0.0, 1.0], [1.0, 0.0]], n_hidden=2, rng=0)
encoder.mbgd(learning_rate=0.1, max_epoch=50, mini_batch_size=1, ui=False)
encoder.predict_many([[0.0, 1.0]])
encoder.save("autoencoder.txt")
```

`score()` gives the fraction of training examples whose rounded prediction
matches the target exactly.

## What it does not do

This is a library only: it has no command-line program. It has no
multi-layer neural network beyond the single-hidden-layer `AutoEncoder`.
Saved parameters cannot be loaded back, and `CLogLogReg` and `BernoulliNB`
have no way to save their state to a file.

## Tests

```
pip install .[test]
pytest
```