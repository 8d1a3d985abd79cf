import numpy as np
import pandas as pd

from Dataset import Dataset

def get_dataset(path, features, target):
	# read csv and keep rows where every chosen column is present
	data = pd.read_csv(path)
	data = data[features + [target]].dropna()
	return Dataset.from_frame(data, features, target)

def simulate_data(n=200, mode="regression", noise=0.3, seed=None):
	rng = np.random.default_rng(seed)

	if mode == "regression":
		# noisy sine curve, one feature
		x = rng.uniform(0, 2 * np.pi, n)
		y = np.sin(x) + rng.normal(0, noise, n)
		return Dataset(x, y)

	if mode == "classification":
		# two overlapping blobs in the plane, labelled A and B
		labels = rng.choice(np.array(["A", "B"]), n)
		centers = np.where((labels == "A")[:, None], [-1.0, -1.0], [1.0, 1.0])
		x = centers + rng.normal(0, 1 + noise, (n, 2))
		return Dataset(x, labels)

	raise ValueError('mode must be either "regression" or "classification"')
