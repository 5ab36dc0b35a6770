"""
Rating calculation from contest performance history.

Implements the AtCoder rating formula on unpositivized ratings:
  rating = log2(sum_k 0.9^(k+1) * 2^(perf_k / 800) / sum_k 0.9^(k+1)) * 800 - f(n)

Where:
  perf_k = performance of the k-th most recent rated contest (k = 0 is newest)
  n      = number of rated contests
  f(n)   = correction for having only n samples, f(1) = 1200, f(inf) = 0

Histories are newest-first: history[0] is the most recent contest.

The loops below multiply step by step instead of calling pow() so that the
results agree to the last bit with other implementations of the formula.

Non-finite and out-of-range performances are not rejected: they come out
as -inf, inf or NaN, never as a Python exception.

Formula after koba-e964's atcoder-rating-estimator (Copyright 2017 koba-e964,
https://github.com/koba-e964/atcoder-rating-estimator).
"""

import math
from typing import Optional, Sequence

from acrating.rating.constants import (
    CORRECTION_SCALE,
    DECAY,
    FINF_SAMPLES,
    PERFORMANCE_SCALE,
    SEARCH_DEFAULTS,
    SQUARED_DECAY,
)


class InvalidInputError(ValueError):
    """Raised when an input violates a precondition of the rating engine."""
    pass


def _pow2(exponent: float) -> float:
    """2 ** exponent, saturating to inf instead of raising OverflowError."""
    try:
        return 2.0 ** exponent
    except OverflowError:
        return math.inf


def _log2(value: float) -> float:
    """log2 that returns -inf for 0 instead of raising."""
    if value == 0.0:
        return -math.inf
    return math.log2(value)


def _bigf(n: int) -> float:
    numerator = 1.0
    denominator = 1.0
    for _ in range(n):
        numerator *= SQUARED_DECAY
        denominator *= DECAY
    # Literal 0.19 and 0.1: (1 - 0.81) and (1 - 0.9) round differently
    numerator = (1 - numerator) * SQUARED_DECAY / 0.19
    denominator = (1 - denominator) * DECAY / 0.1
    return math.sqrt(numerator) / denominator


# Limit of _bigf for an infinitely long history
FINF = _bigf(FINF_SAMPLES)


def correction(n: int) -> float:
    """
    Rating correction for a user with n rated contests.

    Starts at 1200 for a single contest and falls toward 0 as the
    history grows.
    """
    return (_bigf(n) - FINF) / (_bigf(1) - FINF) * CORRECTION_SCALE


def calc_rating_from_history(history: Sequence[float]) -> float:
    """
    Calculate the unpositivized rating from a performance history.

    Args:
        history: Performances of rated contests, newest first.
                 Values are not checked; non-finite ones propagate.

    Returns:
        Unpositivized rating

    Raises:
        InvalidInputError: If history is empty

    Example:
        calc_rating_from_history([1500])          # → 300.0
        calc_rating_from_history([2000, 1800])    # newest contest was 2000
    """
    n = len(history)
    if n == 0:
        raise InvalidInputError("history must contain at least one performance")

    numerator = 0.0
    denominator = 0.0
    for i in range(n - 1, -1, -1):
        numerator *= DECAY
        numerator += DECAY * _pow2(history[i] / PERFORMANCE_SCALE)
        denominator *= DECAY
        denominator += DECAY
    return _log2(numerator / denominator) * PERFORMANCE_SCALE - correction(n)


def calc_rating_from_last(last: float, perf: float, rated_matches: int) -> float:
    """
    Update an unpositivized rating with one new performance.

    Gives the same result as recomputing from the full history with
    `perf` prepended, without needing that history.

    Args:
        last: Unpositivized rating before the contest
        perf: Performance in the new contest
        rated_matches: Number of rated contests before this one

    Returns:
        Unpositivized rating after the contest

    Raises:
        InvalidInputError: If rated_matches is negative
    """
    if rated_matches < 0:
        raise InvalidInputError(f"rated_matches must be >= 0, got {rated_matches}")
    # First rated contest: only the correction applies
    if rated_matches == 0:
        return perf - CORRECTION_SCALE

    # Undo the old correction to get back the raw weighted average
    last += correction(rated_matches)
    weight = 9 - 9 * DECAY ** rated_matches
    numerator = weight * _pow2(last / PERFORMANCE_SCALE) + _pow2(perf / PERFORMANCE_SCALE)
    denominator = 1 + weight
    return _log2(numerator / denominator) * PERFORMANCE_SCALE - correction(rated_matches + 1)


def calc_required_performance(
    target_rating: float,
    history: Sequence[float],
    lower: Optional[float] = None,
    upper: Optional[float] = None,
    iterations: Optional[int] = None,
) -> float:
    """
    Find the next-contest performance needed to reach a target rating.

    Bisects on the performance of a hypothetical new contest placed in
    front of `history`. Runs a fixed number of iterations and returns the
    lower end of the final interval, so the answer never overshoots.

    Args:
        target_rating: Targeted unpositivized rating
        history: Past performances, newest first (may be empty)
        lower: Lower bound of the search. Default from SEARCH_DEFAULTS.
        upper: Upper bound of the search. Default from SEARCH_DEFAULTS.
        iterations: Number of bisection steps. Default from SEARCH_DEFAULTS.

    Returns:
        Required performance (lower bound of the final interval)

    Examples:
        # A first contest needs target + 1200
        calc_required_performance(800.0, [])  # → ~2000.0
    """
    if lower is None:
        lower = SEARCH_DEFAULTS["lower"]
    if upper is None:
        upper = SEARCH_DEFAULTS["upper"]
    if iterations is None:
        iterations = SEARCH_DEFAULTS["iterations"]

    past = list(history)
    for _ in range(iterations):
        mid = (lower + upper) / 2
        rating = calc_rating_from_history([mid] + past)
        if target_rating <= rating:
            upper = mid
        else:
            lower = mid
    return lower
