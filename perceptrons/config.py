from dataclasses import dataclass
from typing import Optional

@dataclass
class PerceptronConfig:
    input_size: int
    learning_rate: float = 0.1
    activation: str = "none"
    seed: Optional[int] = None

@dataclass
class TrainConfig:
    num_epochs: int = 100
    verbose: bool = True
    plot_curves: bool = False
    test_after_training: bool = True
