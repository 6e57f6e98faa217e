"""
Shared arithmetic helpers for the valuation formulas
"""


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 when the denominator is 0"""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value to the range [lower, upper]"""
    return max(lower, min(upper, value))
