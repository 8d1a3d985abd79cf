import logging

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split
from sklearn.metrics import root_mean_squared_error

from BootstrapLearner import BootstrapLearner, check_mode
from Dataset import Dataset
from trees.DecisionTreeLearner import DecisionTreeLearner

logger = logging.getLogger(__name__)


class ModelTester:
	def __init__(
		self,
		dataset,
		constituent=DecisionTreeLearner,
		kwargs=None,
		mode="regression",
		test_split=0.35,
		seed=None,
	):
		check_mode(mode)
		if not 0 < test_split < 1:
			raise ValueError("test_split must be between 0 and 1")

		self.constituent = constituent
		self.mode = mode
		self.seed = seed
		# tree learners need to know which kind of tree to grow
		if kwargs is None:
			kwargs = {"mode": mode} if constituent == DecisionTreeLearner else {}
		self.kwargs = kwargs

		x_train, x_test, y_train, y_test = train_test_split(
			dataset.x, dataset.y, test_size=test_split, random_state=seed
		)
		self.train_data = Dataset(x_train, y_train)
		self.test_data = Dataset(x_test, y_test)

	def score(self, y_true, y_pred):
		# RMSE for regression, misclassification rate for classification
		if self.mode == "regression":
			return float(root_mean_squared_error(y_true, y_pred))
		return float(np.mean(np.asarray(y_true, dtype=object) != np.asarray(y_pred, dtype=object)))

	def test_single_model(self):
		model = self.constituent(**self.kwargs)
		model.train(self.train_data.x, self.train_data.y)

		return {
			"in_sample": self.score(self.train_data.y, model.test(self.train_data.x)),
			"out_of_sample": self.score(self.test_data.y, model.test(self.test_data.x)),
		}

	def test_bagged_model(self, bags, n_jobs=1):
		model = BootstrapLearner(
			self.constituent,
			self.kwargs,
			bags,
			mode=self.mode,
			seed=self.seed,
			n_jobs=n_jobs,
		)
		model.train(self.train_data.x, self.train_data.y)

		return {
			"bags": bags,
			"in_sample": self.score(self.train_data.y, model.test(self.train_data.x)),
			"out_of_sample": self.score(self.test_data.y, model.test(self.test_data.x)),
			"oob": model.oob_error(),
		}

	def compare_bag_counts(self, bag_counts, n_jobs=1):
		# one row per bag count: how the errors move as trees are added
		rows = []
		for bags in bag_counts:
			logger.info("testing %d bags", bags)
			rows.append(self.test_bagged_model(bags, n_jobs=n_jobs))
		return pd.DataFrame(rows, columns=["bags", "in_sample", "out_of_sample", "oob"])
