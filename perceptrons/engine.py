import time

import numpy as np
import pandas as pd

from .config import PerceptronConfig, TrainConfig
from .perceptron import Perceptron, split_sample
from .randomness import NumpyRandomSource
from .visualization import plot_training_curves


def build_perceptron(model_cfg: PerceptronConfig) -> Perceptron:
    rng = NumpyRandomSource(model_cfg.seed)
    return Perceptron(
        input_size=model_cfg.input_size,
        learning_rate=model_cfg.learning_rate,
        activation_fn=model_cfg.activation,
        rng=rng,
    )


def train_epochs(perceptron: Perceptron, train_samples, test_samples, test_outputs, num_epochs: int = 100, verbose: bool = True):
    # train targets are the last element of each training sample
    train_outputs = [split_sample(s)[1] for s in train_samples]
    rows = []

    for epoch in range(num_epochs):
        time_start = time.time()

        perceptron.train(train_samples, 1)

        train_acc = perceptron.test(train_samples, train_outputs)
        test_acc = perceptron.test(test_samples, test_outputs)
        weight_norm = float(np.linalg.norm(perceptron.weights))
        time_elapsed = time.time() - time_start

        if verbose:
            if epoch == 0:
                print(f"{'epoch':>5} {'train_acc':>10} {'test_acc':>10} {'|w|':>10} {'time(s)':>8}")
            print(f"{epoch+1:5d} {train_acc:10.4f} {test_acc:10.4f} {weight_norm:10.4f} {time_elapsed:8.4f}")

        rows.append({
            'epoch': epoch+1,
            'train_acc': train_acc,
            'test_acc': test_acc,
            'train_err': 1.0 - train_acc,
            'test_err': 1.0 - test_acc,
            'weight_norm': weight_norm,
            'time_elapsed': time_elapsed,
        })

    history_df = pd.DataFrame(rows, columns=['epoch', 'train_acc', 'test_acc', 'train_err', 'test_err', 'weight_norm', 'time_elapsed'])
    return history_df


def run_training(
    model_cfg: PerceptronConfig,
    train_cfg: TrainConfig,
    train_samples,
    test_samples,
    test_outputs,
):
    if train_cfg.verbose:
        print("Building perceptron...")
    perceptron = build_perceptron(model_cfg)
    if train_cfg.verbose:
        print(perceptron)
        print("Starting training...")

    start_time = time.time()
    history_df = train_epochs(
        perceptron,
        train_samples=train_samples,
        test_samples=test_samples,
        test_outputs=test_outputs,
        num_epochs=train_cfg.num_epochs,
        verbose=train_cfg.verbose,
    )

    if train_cfg.verbose:
        epoch_time = (time.time() - start_time) / max(train_cfg.num_epochs, 1)
        print(f"Training time per epoch: {epoch_time:.4f} seconds")

    if train_cfg.test_after_training:
        accuracy = perceptron.test(test_samples, test_outputs)
        print(f"Test accuracy: {accuracy:.4f}")
        print(f"Learned weights: {perceptron.weights}")

    if train_cfg.plot_curves:
        plot_training_curves(history_df)

    return perceptron, history_df
