########################################################################
# Single-layer perceptron implemented from scratch using numpy
# Online (per-sample) delta rule training, reshuffled every epoch
########################################################################


import numbers

import numpy as np

from .activations import ActivationFunction
from .errors import DimensionMismatchError, MalformedSampleError
from .randomness import NumpyRandomSource

# A prediction counts as correct when it is this close to the expected output.
# Fixed threshold, not scaled to the range of the outputs.
TOLERANCE = 0.0001


def split_sample(sample):
    """Split a sample into (features, target); the target is the last element."""
    sample = np.asarray(sample, dtype=float)
    if sample.size == 0:
        raise MalformedSampleError("No target value provided: sample is empty")
    if sample.ndim != 1:
        raise MalformedSampleError(f"Sample must be a flat sequence of numbers, got shape {sample.shape}")
    return sample[:-1], float(sample[-1])


class Perceptron:

    # Initialize the perceptron with random weights drawn from (-1, 1)
    def __init__(self, input_size, learning_rate=0.1, activation_fn=ActivationFunction.NONE, rng=None):
        if isinstance(input_size, bool) or not isinstance(input_size, numbers.Integral):
            raise ValueError(f"input_size must be an integer, got {input_size!r}")
        if input_size < 0:
            raise ValueError(f"input_size must be >= 0, got {input_size}")
        self._rng = rng if rng is not None else NumpyRandomSource()
        self._input_size = int(input_size)
        self._learning_rate = float(learning_rate)
        self._activation_fn = ActivationFunction.from_name(activation_fn)
        self._weights = np.array([self._rng.uniform(-1.0, 1.0) for _ in range(self._input_size)], dtype=float)

    @property
    def input_size(self):
        return self._input_size

    @property
    def learning_rate(self):
        return self._learning_rate

    @property
    def activation_fn(self):
        return self._activation_fn

    @property
    def weights(self):
        # the instance owns its weights, hand out a copy
        return self._weights.copy()

    def __repr__(self):
        return (f"Perceptron(input_size={self._input_size}, learning_rate={self._learning_rate}, "
                f"activation_fn={self._activation_fn.name}, weights={self._weights.tolist()})")

    def _check_features(self, features):
        if features.ndim != 1:
            raise DimensionMismatchError(len(self._weights), features.shape)
        if len(features) != len(self._weights):
            raise DimensionMismatchError(len(self._weights), len(features))

    # Z = W.X, output = activation(Z)
    def feedforward(self, inputs):
        inputs = np.asarray(inputs, dtype=float)
        self._check_features(inputs)
        z = float(np.dot(inputs, self._weights))
        return self._activation_fn.activate(z)

    def _update_weights(self, features, error):
        # w_i += lr * error * x_i, in place
        self._weights += self._learning_rate * error * features

    def train(self, samples, epochs):
        """
        Train on `samples` for `epochs` passes, one weight update per sample.

        Each sample holds the input features followed by the target value.
        Every epoch works on a freshly shuffled copy, so the caller's samples
        keep their order. Updates are applied one at a time, each depending on
        the weights left by the previous sample.
        """
        if epochs < 0:
            raise ValueError(f"epochs must be >= 0, got {epochs}")

        # check every sample up front so a bad one aborts before any update
        for sample in samples:
            features, _ = split_sample(sample)
            self._check_features(features)

        for _ in range(epochs):
            shuffled = self._rng.shuffle(samples)
            for sample in shuffled:
                features, target = split_sample(sample)
                prediction = self.feedforward(features)
                error = target - prediction
                self._update_weights(features, error)

    def test(self, samples, outputs):
        """
        Fraction of samples whose prediction is within TOLERANCE of the expected output.

        The prediction uses each sample's features (all but its last element);
        the expected values come from `outputs`, not from the samples.
        """
        if len(samples) != len(outputs):
            raise ValueError(f"Got {len(samples)} samples but {len(outputs)} expected outputs")

        correct_predictions = 0
        for sample, expected in zip(samples, outputs):
            features, _ = split_sample(sample)
            prediction = self.feedforward(features)
            if abs(prediction - expected) < TOLERANCE:
                correct_predictions += 1
        # empty test sets are the caller's problem: this raises ZeroDivisionError
        return correct_predictions / len(samples)
