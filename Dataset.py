import numpy as np

from bagging_errors import InvalidArgument


class Dataset:
    def __init__(self, x, y):
        x = np.array(x)
        y = np.array(y)
        # a flat feature array is a single feature
        if x.ndim == 1:
            x = x.reshape(-1, 1)
        if x.ndim != 2:
            raise InvalidArgument(f"features must be 1-D or 2-D, got shape {x.shape}")
        if y.ndim != 1:
            raise InvalidArgument(f"response must be 1-D, got shape {y.shape}")
        if len(x) != len(y):
            raise InvalidArgument(f"{len(x)} feature rows but {len(y)} responses")
        if len(y) == 0:
            raise InvalidArgument("dataset is empty")

        x.setflags(write=False)
        y.setflags(write=False)
        self.x = x
        self.y = y

    @classmethod
    def from_frame(cls, df, features, target):
        return cls(df[features].to_numpy(), df[target].to_numpy())

    def subset(self, indices):
        return Dataset(self.x[indices], self.y[indices])

    def __len__(self):
        return len(self.y)

    def __repr__(self):
        return f"Dataset(n={len(self)}, features={self.x.shape[1]})"
