"""
Rating engine module.

Implements the AtCoder rating estimate with:
- Discounted log-space average of the performance history
- Small-sample correction for users with few rated contests
- Incremental update from the previous rating
- Positivize transform for display ratings
- Required-performance solver (fixed-step bisection)
- Color classification
"""

from acrating.rating.calculator import (
    FINF,
    InvalidInputError,
    calc_rating_from_history,
    calc_rating_from_last,
    calc_required_performance,
    correction,
)
from acrating.rating.color import get_color, get_color_bounds
from acrating.rating.constants import COLOR_BOUNDS, COLOR_NAMES
from acrating.rating.estimator import (
    RatingEstimate,
    estimate_from_history,
    predict_new_rating,
    required_performance_for_display,
)
from acrating.rating.transform import positivize_rating, unpositivize_rating

__all__ = [
    "FINF",
    "InvalidInputError",
    "calc_rating_from_history",
    "calc_rating_from_last",
    "calc_required_performance",
    "correction",
    "get_color",
    "get_color_bounds",
    "COLOR_BOUNDS",
    "COLOR_NAMES",
    "RatingEstimate",
    "estimate_from_history",
    "predict_new_rating",
    "required_performance_for_display",
    "positivize_rating",
    "unpositivize_rating",
]
