import sys
from pathlib import Path
import matplotlib
import pytest

# no windows during tests
matplotlib.use("Agg")

# Add project root to sys.path so tests can import 'perceptrons'
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))


class FixedRandomSource:
    """Hands out a fixed cycle of uniform draws and never reorders on shuffle."""

    def __init__(self, values=(0.5,)):
        self.values = list(values)
        self.uniform_calls = 0
        self.shuffle_calls = 0

    def uniform(self, low, high):
        value = self.values[self.uniform_calls % len(self.values)]
        self.uniform_calls += 1
        return value

    def shuffle(self, sequence):
        self.shuffle_calls += 1
        return list(sequence)


@pytest.fixture
def fixed_rng():
    return FixedRandomSource([0.5, -0.25, 0.75])


@pytest.fixture
def linear_train_samples():
    """Training pairs for f(x) = 2x."""
    return [[0.0, 0.0], [1.0, 2.0], [2.0, 4.0], [3.0, 6.0], [8.0, 16.0]]


@pytest.fixture
def linear_test_data():
    """Held-out samples for f(x) = 2x and their expected outputs."""
    samples = [[0.0, 0.0], [1.0, 2.0], [2.0, 4.0], [3.0, 6.0], [4.0, 8.0]]
    outputs = [0.0, 2.0, 4.0, 6.0, 8.0]
    return samples, outputs


@pytest.fixture
def make_rng():
    """Factory for FixedRandomSource with custom draws."""
    return FixedRandomSource
