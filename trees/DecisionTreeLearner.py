from sklearn.tree import DecisionTreeClassifier, DecisionTreeRegressor

class DecisionTreeLearner:
    def __init__(self, mode="regression", leaf_size=1, max_depth=None, random_state=None):
        self.params = {
            'min_samples_leaf': leaf_size,
            'max_depth': max_depth,
            'random_state': random_state,
        }
        if mode == "regression":
            self.model = DecisionTreeRegressor(**self.params)
        elif mode == "classification":
            self.model = DecisionTreeClassifier(**self.params)
        else:
            raise ValueError('mode must be either "regression" or "classification"')
        self.mode = mode

    def train(self, x_train, y_train):
        self.model.fit(x_train, y_train)

    def test(self, x_test):
        return self.model.predict(x_test)

    def depth(self):
        return self.model.get_depth()
