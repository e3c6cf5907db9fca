import math
import pytest
from perceptrons import ActivationFunction

def test_identity():
    """NONE passes the weighted sum straight through."""
    assert ActivationFunction.NONE.activate(-3.5) == -3.5
    assert ActivationFunction.NONE.activate(0) == 0.0

def test_step():
    assert ActivationFunction.STEP.activate(0.0) == 1.0
    assert ActivationFunction.STEP.activate(2.0) == 1.0
    assert ActivationFunction.STEP.activate(-1e-9) == 0.0

def test_sigmoid():
    assert ActivationFunction.SIGMOID.activate(0.0) == 0.5
    assert ActivationFunction.SIGMOID.activate(1.0) == pytest.approx(1.0 / (1.0 + math.exp(-1.0)))
    assert ActivationFunction.SIGMOID.activate(-1.0) == pytest.approx(1.0 / (1.0 + math.exp(1.0)))

def test_sigmoid_is_total():
    """Huge inputs saturate instead of overflowing."""
    assert ActivationFunction.SIGMOID.activate(1e6) == 1.0
    assert ActivationFunction.SIGMOID.activate(-1e6) == 0.0

def test_tanh_and_relu():
    assert ActivationFunction.TANH.activate(0.5) == pytest.approx(math.tanh(0.5))
    assert ActivationFunction.RELU.activate(-2.0) == 0.0
    assert ActivationFunction.RELU.activate(2.0) == 2.0

@pytest.mark.parametrize("name, expected", [
    ("none", ActivationFunction.NONE),
    ("Identity", ActivationFunction.NONE),
    (" STEP ", ActivationFunction.STEP),
    ("sigmoid", ActivationFunction.SIGMOID),
    ("tanh", ActivationFunction.TANH),
    ("relu", ActivationFunction.RELU),
    (ActivationFunction.RELU, ActivationFunction.RELU),
])
def test_from_name(name, expected):
    assert ActivationFunction.from_name(name) is expected

def test_from_name_unknown():
    with pytest.raises(ValueError, match="Unknown activation"):
        ActivationFunction.from_name("softmax")
