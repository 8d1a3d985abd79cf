class BaggingError(Exception):
    pass


class InvalidArgument(BaggingError, ValueError):
    pass


class LearnerFitError(BaggingError):
    # args are kept as (bag, cause) so the error survives pickling between workers
    def __init__(self, bag, cause):
        super().__init__(bag, cause)
        self.bag = bag
        self.cause = cause

    def __str__(self):
        return f"learner failed on bag {self.bag}: {self.cause!r}"


class EmptyOobSetError(BaggingError):
    def __init__(self, message="no record is out of bag in any bag"):
        super().__init__(message)
