import numpy as np
import pandas as pd
from ModelTester import ModelTester
from trees.DecisionTreeLearner import DecisionTreeLearner
from useful_functions import simulate_data

pd.set_option("display.precision", 4)

bag_counts = [1, 2, 5, 10, 25, 50, 100]

# Regression: noisy sine curve, fully grown trees
data = simulate_data(n=300, mode="regression", noise=0.3, seed=1)
tester = ModelTester(data, DecisionTreeLearner, {"mode": "regression", "leaf_size": 1}, mode="regression", seed=1)

single = tester.test_single_model()
print(f"Single tree, RMSE in sample: {single['in_sample']}, out of sample: {single['out_of_sample']}")
print(tester.compare_bag_counts(bag_counts))

# Classification: two overlapping blobs
data = simulate_data(n=300, mode="classification", noise=0.3, seed=2)
tester = ModelTester(data, mode="classification", seed=2)

single = tester.test_single_model()
print(f"Single tree, error rate in sample: {single['in_sample']}, out of sample: {single['out_of_sample']}")
results = tester.compare_bag_counts(bag_counts)
print(results)

# OOB error should track the held-out error once there are enough trees
gap = np.abs(results["oob"] - results["out_of_sample"])
print(f"Largest OOB / test gap past 25 bags: {gap[results['bags'] >= 25].max()}")
