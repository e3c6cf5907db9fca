########################################################################
# Activation functions for the single-layer perceptron
# Closed set of variants, each a pure float -> float function
########################################################################

import math
from enum import Enum


class ActivationFunction(Enum):
    NONE = "none"
    STEP = "step"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    RELU = "relu"

    def activate(self, x):
        x = float(x)
        if self is ActivationFunction.NONE:
            return x
        if self is ActivationFunction.STEP:
            return 1.0 if x >= 0 else 0.0
        if self is ActivationFunction.SIGMOID:
            # split on sign so exp() never overflows
            if x >= 0:
                return 1.0 / (1.0 + math.exp(-x))
            z = math.exp(x)
            return z / (1.0 + z)
        if self is ActivationFunction.TANH:
            return math.tanh(x)
        if self is ActivationFunction.RELU:
            return x if x > 0 else 0.0
        raise ValueError(f"Unhandled activation function {self!r}")

    @classmethod
    def from_name(cls, name):
        """Resolve a config string (or an existing member) to an ActivationFunction."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        if key == "identity":
            key = "none"
        for member in cls:
            if member.value == key:
                return member
        available = sorted(m.value for m in cls) + ["identity"]
        raise ValueError(f"Unknown activation '{name}'. Available: {available}")
