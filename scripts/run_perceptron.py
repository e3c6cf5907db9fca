########################################################################
# Demonstrates the single-layer perceptron on two problems:
# learning f(x) = 2x with the identity activation, and the OR gate
# with a step activation (constant 1 input stands in for the bias)
########################################################################

import sys
from pathlib import Path
import numpy as np

# Add project root to sys.path
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from perceptrons import PerceptronConfig, TrainConfig, run_training, plot_fit


if __name__ == "__main__":

    show_plots = True

    ####################################################################### f(x) = 2x, identity activation
    ######################################################################

    train_samples = [[0.0, 0.0], [1.0, 2.0], [2.0, 4.0], [3.0, 6.0], [8.0, 16.0]]
    test_samples = [[0.0, 0.0], [1.0, 2.0], [2.0, 4.0], [3.0, 6.0], [4.0, 8.0]]
    test_outputs = [0.0, 2.0, 4.0, 6.0, 8.0]

    model_cfg = PerceptronConfig(input_size=1, learning_rate=0.1, activation="none", seed=42)
    train_cfg = TrainConfig(num_epochs=100, verbose=True, plot_curves=show_plots)

    model, history_df = run_training(model_cfg, train_cfg, train_samples, test_samples, test_outputs)
    if show_plots:
        plot_fit(model, train_samples)

    ####################################################################### OR gate, step activation
    ######################################################################

    X = np.array([
        [0, 0],
        [0, 1],
        [1, 0],
        [1, 1]
    ], dtype=float)
    y = np.array([0, 1, 1, 1], dtype=float)

    # [1, x1, x2, target]
    or_samples = np.column_stack([np.ones(len(X)), X, y])

    model_cfg = PerceptronConfig(input_size=3, learning_rate=0.1, activation="step", seed=0)
    train_cfg = TrainConfig(num_epochs=50, verbose=False, plot_curves=show_plots)

    model, history_df = run_training(model_cfg, train_cfg, or_samples, or_samples, y)
    print(history_df.tail())
