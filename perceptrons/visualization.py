import numpy as np
import matplotlib.pyplot as plt


def plot_training_curves(history_df):
    num_epochs = len(history_df)
    epochs = np.arange(1, num_epochs+1)

    plt.figure(figsize=(12,5))
    plt.subplot(1,2,1)
    plt.plot(epochs, history_df['train_acc'], label='Train Accuracy')
    plt.plot(epochs, history_df['test_acc'], label='Test Accuracy')
    plt.ylim(-0.05, 1.05)
    plt.xlabel('Epoch')
    plt.ylabel('Accuracy')
    plt.title('Training and Test Accuracy')
    plt.legend()
    plt.subplot(1,2,2)
    plt.plot(epochs, history_df['weight_norm'], label='|w|')
    plt.xlabel('Epoch')
    plt.ylabel('Weight norm')
    plt.title('Weight Vector Norm')
    plt.legend()
    plt.tight_layout()
    plt.show()


# Only makes sense for a single input feature: plots samples and the learned curve
def plot_fit(perceptron, samples):
    if perceptron.input_size != 1:
        raise ValueError(f"plot_fit needs a 1-feature perceptron, got input_size={perceptron.input_size}")

    data = np.asarray(samples, dtype=float)
    x, y = data[:, 0], data[:, -1]

    x_line = np.linspace(x.min() - 1, x.max() + 1, 200)
    y_line = [perceptron.feedforward([xi]) for xi in x_line]

    plt.plot(x_line, y_line, label=f'Learned (w={perceptron.weights[0]:.4f})')
    plt.scatter(x, y, c='k', label='Samples')
    plt.xlabel("x")
    plt.ylabel("y")
    plt.title("Perceptron Fit")
    plt.legend()
    plt.grid(True)
    plt.show()
