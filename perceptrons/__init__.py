"""Single-layer perceptron and training utilities."""

from .activations import ActivationFunction
from .config import PerceptronConfig, TrainConfig
from .engine import build_perceptron, run_training, train_epochs
from .errors import DimensionMismatchError, MalformedSampleError, PerceptronError
from .perceptron import TOLERANCE, Perceptron, split_sample
from .randomness import NumpyRandomSource, RandomSource
from .visualization import plot_fit, plot_training_curves

__all__ = [
    "ActivationFunction",
    "PerceptronConfig",
    "TrainConfig",
    "build_perceptron",
    "run_training",
    "train_epochs",
    "DimensionMismatchError",
    "MalformedSampleError",
    "PerceptronError",
    "TOLERANCE",
    "Perceptron",
    "split_sample",
    "NumpyRandomSource",
    "RandomSource",
    "plot_fit",
    "plot_training_curves",
]
