import logging
from collections import Counter

import numpy as np
from joblib import Parallel, delayed
from sklearn.metrics import root_mean_squared_error

from Dataset import Dataset
from bagging_errors import EmptyOobSetError, InvalidArgument, LearnerFitError

logger = logging.getLogger(__name__)

MODES = ("regression", "classification")


class BagResult:
    """One fitted bag: the model, the bootstrap sample it saw and its out-of-bag rows.

    The sample has one index per record of the original dataset, so the
    out-of-bag set is the complement of the sample's distinct values in
    ``range(len(sample))``.
    """

    def __init__(self, model, sample, bag=0):
        sample = np.array(sample, dtype=int)
        oob = np.setdiff1d(np.arange(len(sample)), sample)
        sample.setflags(write=False)
        oob.setflags(write=False)
        self.bag = bag
        self.model = model
        self.sample = sample
        self.oob = oob

    def __repr__(self):
        return f"BagResult(bag={self.bag}, n={len(self.sample)}, oob={len(self.oob)})"


def check_mode(mode):
    if mode not in MODES:
        raise InvalidArgument(f'mode must be one of {MODES}, got "{mode}"')


def check_bag_count(bags):
    if isinstance(bags, bool) or not isinstance(bags, (int, np.integer)) or bags <= 0:
        raise InvalidArgument(f"bag count must be a positive integer, got {bags!r}")


def _check_bag_results(bag_results):
    if not len(bag_results):
        raise InvalidArgument("no fitted bags")


def bag_generators(seed, bags):
    """One independent random generator per bag.

    ``seed`` is None (fresh entropy), an int, or a sequence with one seed per
    bag. With an int, bag b draws from ``SeedSequence(seed, spawn_key=(b,))``,
    which is what ``SeedSequence(seed).spawn(bags)[b]`` yields, so a bag's
    sample depends only on the seed, its index and the dataset size.
    """
    if seed is None:
        return [np.random.default_rng(child) for child in np.random.SeedSequence().spawn(bags)]
    if isinstance(seed, (int, np.integer)):
        return [
            np.random.default_rng(np.random.SeedSequence(int(seed), spawn_key=(b,)))
            for b in range(bags)
        ]
    seeds = list(seed)
    if len(seeds) != bags:
        raise InvalidArgument(f"{len(seeds)} seeds given for {bags} bags")
    return [np.random.default_rng(s) for s in seeds]


def draw_bootstrap_sample(n, rng):
    return rng.choice(n, n, replace=True)


def _fit_bag(bag, dataset, constituent, kwargs, rng):
    sample = draw_bootstrap_sample(len(dataset), rng)
    resampled = dataset.subset(sample)
    try:
        model = constituent(**kwargs)
        model.train(resampled.x, resampled.y)
    except Exception as err:
        raise LearnerFitError(bag, err) from err
    result = BagResult(model, sample, bag=bag)
    logger.debug("fitted bag %d with %d out-of-bag records", bag, len(result.oob))
    return result


def fit(dataset, constituent, kwargs=None, bags=10, seed=None, n_jobs=1):
    """Fit ``bags`` models of ``constituent(**kwargs)``, each on its own bootstrap sample.

    Bags share nothing but the read-only dataset, so they run on joblib
    threads when ``n_jobs`` allows. Results come back in bag order. If the
    learner raises on any bag the whole fit fails with LearnerFitError.
    """
    check_bag_count(bags)
    if not len(dataset):
        raise InvalidArgument("dataset is empty")
    kwargs = kwargs or {}
    generators = bag_generators(seed, bags)

    bag_results = Parallel(n_jobs=n_jobs, prefer="threads")(
        delayed(_fit_bag)(b, dataset, constituent, kwargs, generators[b]) for b in range(bags)
    )
    logger.info("fitted %d bags on %d records", bags, len(dataset))
    return list(bag_results)


def aggregate(values, mode):
    """Reduce one record's predictions: mean for regression, majority vote for classification.

    Vote ties go to the label seen first, i.e. the earliest bag in fitting order.
    """
    check_mode(mode)
    if mode == "regression":
        return float(np.mean(values))
    # most_common keeps first-encountered order among equal counts
    label = Counter(values).most_common(1)[0][0]
    return label.item() if isinstance(label, np.generic) else label


def _as_matrix(x):
    x = np.asarray(x)
    if x.ndim == 1:
        x = x.reshape(-1, 1)
    return x


def bag_predictions(bag_results, x):
    _check_bag_results(bag_results)
    x = _as_matrix(x)
    return np.array([np.asarray(result.model.test(x)) for result in bag_results])


def predict(bag_results, query, mode):
    check_mode(mode)
    query = np.asarray(query)
    if query.ndim > 1:
        raise InvalidArgument(f"query must be a single feature vector, got shape {query.shape}")
    preds = bag_predictions(bag_results, query.reshape(1, -1))
    return aggregate(preds[:, 0], mode)


def predict_many(bag_results, x, mode):
    check_mode(mode)
    preds = bag_predictions(bag_results, x)
    return np.array([aggregate(preds[:, i], mode) for i in range(preds.shape[1])])


def _oob_votes(bag_results, dataset):
    _check_bag_results(bag_results)
    votes = [[] for _ in range(len(dataset))]
    for result in bag_results:
        if len(result.sample) != len(dataset):
            raise InvalidArgument(
                f"bag {result.bag} was drawn from {len(result.sample)} records, dataset has {len(dataset)}"
            )
        if not len(result.oob):
            continue
        preds = result.model.test(dataset.x[result.oob])
        for i, pred in zip(result.oob, preds):
            votes[i].append(pred)
    return votes


def oob_predictions(bag_results, dataset, mode):
    """Out-of-bag prediction per record; NaN (regression) or None (classification) where no bag left it out."""
    check_mode(mode)
    votes = _oob_votes(bag_results, dataset)
    if mode == "regression":
        output = np.full(len(dataset), np.nan)
    else:
        output = np.full(len(dataset), None, dtype=object)
    for i, record_votes in enumerate(votes):
        if record_votes:
            output[i] = aggregate(record_votes, mode)
    return output


def oob_error(bag_results, dataset, mode):
    """Out-of-bag error: RMSE for regression, misclassification rate for classification.

    Records that are in every bag's sample have no out-of-bag prediction. They
    are left out of the error entirely, numerator and denominator alike.
    """
    check_mode(mode)
    votes = _oob_votes(bag_results, dataset)
    covered = [i for i, record_votes in enumerate(votes) if record_votes]
    if not covered:
        raise EmptyOobSetError()
    if len(covered) < len(dataset):
        logger.debug(
            "%d of %d records have no out-of-bag prediction and are excluded",
            len(dataset) - len(covered),
            len(dataset),
        )

    predicted = [aggregate(votes[i], mode) for i in covered]
    actual = dataset.y[covered]
    if mode == "regression":
        return float(root_mean_squared_error(actual, predicted))
    return float(np.mean([p != a for p, a in zip(predicted, actual)]))


class BootstrapLearner:
    def __init__(self, constituent, kwargs=None, bags=10, mode="regression", seed=None, n_jobs=1):
        check_mode(mode)
        check_bag_count(bags)
        self.constituent = constituent
        self.kwargs = kwargs or {}
        self.bags = bags
        self.mode = mode
        self.seed = seed
        self.n_jobs = n_jobs
        self.dataset = None
        self.bag_results = []

    def train(self, x, y):
        self.dataset = Dataset(x, y)
        self.bag_results = fit(
            self.dataset,
            self.constituent,
            self.kwargs,
            self.bags,
            seed=self.seed,
            n_jobs=self.n_jobs,
        )

    def test(self, x):
        return predict_many(self.bag_results, x, self.mode)

    def oob_predictions(self):
        return oob_predictions(self.bag_results, self.dataset, self.mode)

    def oob_error(self):
        return oob_error(self.bag_results, self.dataset, self.mode)
