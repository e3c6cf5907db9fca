class PerceptronError(ValueError):
    """Base class for malformed data handed to a Perceptron."""


class MalformedSampleError(PerceptronError):
    """A sample has no target element."""


class DimensionMismatchError(PerceptronError):
    """A feature vector's shape disagrees with the weight vector's length."""

    def __init__(self, expected, got):
        # args stay (expected, got) so the exception pickles and copies
        super().__init__(expected, got)
        self.expected = expected
        self.got = got

    def __str__(self):
        return f"Feature length mismatch: perceptron has {self.expected} weights, got {self.got} features"
