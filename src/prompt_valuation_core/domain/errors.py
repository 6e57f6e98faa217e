"""
Domain Errors

Exception hierarchy shared by the calculators, the scorer adapter and the orchestrator.
"""


class ValuationError(Exception):
    """Base class for all valuation failures"""
    pass


class InvalidInputError(ValuationError, ValueError):
    """A request field is negative, non-finite, out of range, or otherwise unusable"""
    pass


class ScorerError(ValuationError):
    """The qualitative scorer failed or returned an unusable judgment"""
    pass


class BatchValuationError(ValuationError):
    """One calculator in a CORE/ALL batch failed, so the whole batch is discarded"""

    def __init__(self, method: str, cause: BaseException):
        self.method = method
        self.cause = cause
        super().__init__(f"{method} valuation failed: {cause}")
