"""
Conversion between internal and display ratings.

Internal (unpositivized) ratings can be any real number. Display
(positivized) ratings are always positive: below 400 they are compressed
toward 0 with an exponential instead of being clipped, so the mapping can
be inverted exactly.

Formula (for ratings below 400):
    display = 400 * exp((internal - 400) / 400)
    internal = 400 + 400 * ln(display / 400)

Both sides have slope 1 at 400, so the curve is smooth at the boundary.
"""

import math

from acrating.rating.constants import POSITIVIZE_THRESHOLD


def positivize_rating(rating: float) -> float:
    """Map an unpositivized rating in (-inf, inf) to a display rating in (0, inf)."""
    if rating >= POSITIVIZE_THRESHOLD:
        return rating
    return POSITIVIZE_THRESHOLD * math.exp((rating - POSITIVIZE_THRESHOLD) / POSITIVIZE_THRESHOLD)


def unpositivize_rating(rating: float) -> float:
    """
    Map a display rating in (0, inf) back to an unpositivized rating.

    Display ratings are positive by construction. For 0 this returns -inf
    and for negative input NaN, following float semantics rather than
    raising.
    """
    if rating >= POSITIVIZE_THRESHOLD:
        return rating
    if rating == 0:
        return -math.inf
    if rating < 0 or math.isnan(rating):
        return math.nan
    return POSITIVIZE_THRESHOLD + POSITIVIZE_THRESHOLD * math.log(rating / POSITIVIZE_THRESHOLD)
