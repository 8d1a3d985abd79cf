import numpy as np
import pandas as pd
import pytest

from Dataset import Dataset
from bagging_errors import InvalidArgument
from useful_functions import get_dataset, simulate_data


def test_flat_features_become_one_column():
    data = Dataset([1, 2, 3], [2, 4, 6])
    assert data.x.shape == (3, 1)
    assert len(data) == 3


def test_arrays_are_read_only():
    x = np.arange(6).reshape(3, 2)
    data = Dataset(x, [0, 1, 0])

    with pytest.raises(ValueError):
        data.x[0, 0] = 10
    with pytest.raises(ValueError):
        data.y[0] = 1
    # the caller's array is copied, not frozen
    x[0, 0] = 10
    assert data.x[0, 0] == 0


@pytest.mark.parametrize(
    "x, y",
    [
        ([], []),
        ([1, 2, 3], [1, 2]),
        (np.zeros((2, 2, 2)), [1, 2]),
        ([1, 2], [[1], [2]]),
    ],
)
def test_rejects_bad_shapes(x, y):
    with pytest.raises(InvalidArgument):
        Dataset(x, y)


def test_subset_indexes_with_repeats():
    data = Dataset([[1, 10], [2, 20], [3, 30]], ["a", "b", "c"])
    resampled = data.subset(np.array([2, 2, 0]))

    assert resampled.x.tolist() == [[3, 30], [3, 30], [1, 10]]
    assert resampled.y.tolist() == ["c", "c", "a"]


def test_from_frame():
    df = pd.DataFrame({"a": [1.0, 2.0], "b": [3.0, 4.0], "target": [0, 1]})
    data = Dataset.from_frame(df, ["a", "b"], "target")

    assert data.x.tolist() == [[1.0, 3.0], [2.0, 4.0]]
    assert data.y.tolist() == [0, 1]


def test_get_dataset_drops_missing_rows(tmp_path):
    path = tmp_path / "data.csv"
    pd.DataFrame({"a": [1.0, None, 3.0], "other": [None, None, None], "target": [1.0, 2.0, 3.0]}).to_csv(path, index=False)

    data = get_dataset(path, ["a"], "target")
    assert len(data) == 2
    assert data.y.tolist() == [1.0, 3.0]


def test_simulate_regression():
    data = simulate_data(n=100, mode="regression", noise=0.0, seed=3)

    assert data.x.shape == (100, 1)
    assert np.allclose(data.y, np.sin(data.x[:, 0]))
    assert np.all((data.x >= 0) & (data.x <= 2 * np.pi))


def test_simulate_classification():
    data = simulate_data(n=80, mode="classification", seed=3)

    assert data.x.shape == (80, 2)
    assert set(data.y.tolist()) <= {"A", "B"}


def test_simulate_is_reproducible():
    first = simulate_data(n=20, seed=11)
    second = simulate_data(n=20, seed=11)
    assert np.array_equal(first.x, second.x)
    assert np.array_equal(first.y, second.y)


def test_simulate_rejects_unknown_mode():
    with pytest.raises(ValueError):
        simulate_data(mode="ranking")
