from typing import List, Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(Protocol):
    """What the perceptron needs from a random number provider."""

    def uniform(self, low: float, high: float) -> float:
        ...

    def shuffle(self, sequence: Sequence[T]) -> List[T]:
        ...


class NumpyRandomSource:
    """RandomSource backed by numpy's Generator; pass a seed for repeatable runs."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        # Generator.uniform is half-open [low, high), redraw the low edge
        value = float(self._rng.uniform(low, high))
        while value == low:
            value = float(self._rng.uniform(low, high))
        return value

    def shuffle(self, sequence: Sequence[T]) -> List[T]:
        # permute indices, leaving the caller's sequence alone
        order = self._rng.permutation(len(sequence))
        return [sequence[i] for i in order]
