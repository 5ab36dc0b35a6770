"""
Display-level rating estimates.

The calculator works on unpositivized ratings. Users see positivized
ratings and their color. These helpers do the conversion on both sides so
callers can go straight from a history or a displayed rating to what the
contest site would show.
"""

from dataclasses import dataclass
from typing import Sequence

from acrating.rating.calculator import (
    calc_rating_from_history,
    calc_rating_from_last,
    calc_required_performance,
)
from acrating.rating.color import get_color
from acrating.rating.transform import positivize_rating, unpositivize_rating


@dataclass(frozen=True)
class RatingEstimate:
    """
    An estimated rating in both representations.

    Attributes:
        rating: Unpositivized (internal) rating
        display_rating: Positivized rating shown to users
        color: Color name of display_rating
        rated_matches: Rated contests the estimate is based on
    """
    rating: float
    display_rating: float
    color: str
    rated_matches: int

    @property
    def rounded(self) -> int:
        """Display rating rounded to an integer, as the site shows it."""
        return round(self.display_rating)

    def __repr__(self) -> str:
        return (
            f"<RatingEstimate({self.display_rating:.0f} {self.color}, "
            f"internal={self.rating:.2f}, matches={self.rated_matches})>"
        )


def _make_estimate(rating: float, rated_matches: int) -> RatingEstimate:
    display = positivize_rating(rating)
    return RatingEstimate(
        rating=rating,
        display_rating=display,
        color=get_color(display),
        rated_matches=rated_matches,
    )


def estimate_from_history(history: Sequence[float]) -> RatingEstimate:
    """
    Estimate the current rating from a newest-first performance history.

    Raises:
        InvalidInputError: If history is empty
    """
    return _make_estimate(calc_rating_from_history(history), len(history))


def predict_new_rating(
    old_display_rating: float,
    perf: float,
    rated_matches: int,
) -> RatingEstimate:
    """
    Predict the rating after one more contest from the currently shown rating.

    Args:
        old_display_rating: Positivized rating before the contest (ignored
                            when rated_matches is 0)
        perf: Performance in the new contest
        rated_matches: Number of rated contests before this one

    Returns:
        RatingEstimate after the contest

    Example:
        # First contest with a 1500 performance: internal 300, shown as 312
        predict_new_rating(0, 1500, 0).rounded  # → 312
    """
    if rated_matches == 0:
        last = 0.0
    else:
        last = unpositivize_rating(old_display_rating)
    new_rating = calc_rating_from_last(last, perf, rated_matches)
    return _make_estimate(new_rating, rated_matches + 1)


def required_performance_for_display(
    target_display_rating: float,
    history: Sequence[float],
) -> float:
    """Performance needed in the next contest to reach a displayed rating."""
    return calc_required_performance(unpositivize_rating(target_display_rating), history)
