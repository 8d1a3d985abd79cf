import numpy as np
import pytest

from Dataset import Dataset


class ConstantLearner:
    """Mock learner that ignores its training data."""

    def __init__(self, value):
        self.value = value

    def train(self, x, y):
        pass

    def test(self, x):
        return np.full(len(x), self.value, dtype=object)


class FailingLearner:
    def __init__(self, message="cannot fit"):
        self.message = message

    def train(self, x, y):
        raise RuntimeError(self.message)

    def test(self, x):
        raise AssertionError("never trained")


@pytest.fixture
def small_dataset():
    return Dataset([1, 2, 3], [2.0, 4.0, 6.0])


@pytest.fixture
def constant_learner():
    return ConstantLearner


@pytest.fixture
def failing_learner():
    return FailingLearner
