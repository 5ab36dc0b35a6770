"""
Unit tests for the rating engine.

Tests the rating calculation to ensure:
- A single contest gives performance - 1200
- Incremental updates agree with recomputing from the full history
- More recent contests weigh more, and ratings rise with any performance
- Positivize/unpositivize invert each other
- The required-performance search lands just below the target
- Colors follow the 400-point bands
"""

import math
import random

import pytest

from acrating.rating import (
    COLOR_NAMES,
    FINF,
    InvalidInputError,
    calc_rating_from_history,
    calc_rating_from_last,
    calc_required_performance,
    correction,
    estimate_from_history,
    get_color,
    get_color_bounds,
    positivize_rating,
    predict_new_rating,
    required_performance_for_display,
    unpositivize_rating,
)


class TestCorrection:
    """Tests for the small-sample correction f(n)."""

    def test_single_contest_is_1200(self):
        assert correction(1) == 1200.0

    def test_vanishes_for_long_histories(self):
        assert correction(400) == 0.0
        assert correction(1000) == 0.0

    def test_strictly_decreasing(self):
        values = [correction(n) for n in range(1, 60)]
        assert all(a > b for a, b in zip(values, values[1:]))
        assert all(v > 0 for v in values)

    def test_finf_limit(self):
        """FINF approximates sqrt(0.81 / 0.19) / 9."""
        assert FINF == pytest.approx(math.sqrt(0.81 / 0.19) / 9.0)


class TestCalcRatingFromHistory:
    """Tests for calc_rating_from_history."""

    def test_single_contest(self):
        """One contest: rating is the performance minus the full correction."""
        assert calc_rating_from_history([1500]) == pytest.approx(300.0, abs=1e-9)
        assert calc_rating_from_history([1500]) == pytest.approx(
            calc_rating_from_last(0.0, 1500, 0), abs=1e-9
        )

    def test_constant_history(self):
        """Equal performances average to themselves before correction."""
        history = [2000.0] * 10
        assert calc_rating_from_history(history) == pytest.approx(2000.0 - correction(10))

    def test_finite_and_deterministic(self, random_histories):
        for history in random_histories:
            first = calc_rating_from_history(history)
            assert math.isfinite(first)
            assert calc_rating_from_history(history) == first
            assert calc_rating_from_history(tuple(history)) == first

    def test_newest_contest_weighs_most(self):
        """history[0] is the most recent contest and dominates the average."""
        recent_good = calc_rating_from_history([2400, 1200])
        recent_bad = calc_rating_from_history([1200, 2400])
        assert recent_good > recent_bad

    def test_monotonic_in_every_element(self, random_histories):
        for history in random_histories:
            base = calc_rating_from_history(history)
            for i in range(len(history)):
                raised = list(history)
                raised[i] += 100.0
                assert calc_rating_from_history(raised) >= base

    def test_monotonic_in_prepended_element(self):
        history = [1800.0, 1600.0, 2100.0]
        ratings = [calc_rating_from_history([p] + history) for p in range(-2000, 4001, 250)]
        assert ratings == sorted(ratings)

    def test_empty_history_raises(self):
        with pytest.raises(InvalidInputError):
            calc_rating_from_history([])

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            calc_rating_from_history([])

    def test_nan_propagates(self):
        assert math.isnan(calc_rating_from_history([1500.0, math.nan]))

    @pytest.mark.parametrize(
        "history, expected",
        [
            ([-math.inf], -math.inf),
            ([-1e6], -math.inf),
            ([1e6], math.inf),
            ([math.inf], math.inf),
            ([math.inf, 1500.0], math.inf),
        ],
    )
    def test_extreme_values_propagate(self, history, expected):
        """Underflow and overflow give -inf/inf instead of raising."""
        assert calc_rating_from_history(history) == expected

    def test_underflowing_old_contest_stays_finite(self):
        assert math.isfinite(calc_rating_from_history([1500.0, -math.inf]))


class TestCalcRatingFromLast:
    """Tests for the incremental update."""

    def test_first_contest(self):
        assert calc_rating_from_last(12345.0, 1500, 0) == 300
        assert calc_rating_from_last(0.0, 800, 0) == -400

    def test_matches_full_recompute(self, random_histories):
        """Appending a contest incrementally equals recomputing with it as newest."""
        rng = random.Random(7)
        for history in random_histories:
            perf = rng.uniform(-500.0, 3500.0)
            last = calc_rating_from_history(history)
            incremental = calc_rating_from_last(last, perf, len(history))
            full = calc_rating_from_history([perf] + history)
            assert incremental == pytest.approx(full, rel=1e-6, abs=1e-6)

    def test_chained_updates(self):
        """Folding a history oldest-to-newest reproduces the batch result."""
        history = [2210.0, 1980.0, 1875.0, 2050.0, 1600.0, 1420.0]
        rating = 0.0
        for matches, perf in enumerate(reversed(history)):
            rating = calc_rating_from_last(rating, perf, matches)
        assert rating == pytest.approx(calc_rating_from_history(history), rel=1e-6)

    @pytest.mark.parametrize(
        "last, perf, expected",
        [
            (-math.inf, -math.inf, -math.inf),
            (1500.0, 1e6, math.inf),
            (math.inf, 1500.0, math.inf),
            (-1e6, -1e6, -math.inf),
        ],
    )
    def test_extreme_values_propagate(self, last, perf, expected):
        assert calc_rating_from_last(last, perf, 3) == expected

    def test_nan_propagates(self):
        assert math.isnan(calc_rating_from_last(1500.0, math.nan, 3))

    def test_negative_matches_raises(self):
        with pytest.raises(InvalidInputError):
            calc_rating_from_last(1000.0, 1500.0, -1)


class TestPositivize:
    """Tests for the display rating transform."""

    @pytest.mark.parametrize("rating", [400.0, 401.5, 1200.0, 3500.0])
    def test_identity_above_threshold(self, rating):
        assert positivize_rating(rating) == rating
        assert unpositivize_rating(rating) == rating

    def test_compresses_below_threshold(self):
        assert positivize_rating(0.0) == pytest.approx(400.0 * math.exp(-1.0))
        assert 0 < positivize_rating(-20000.0) < positivize_rating(-1000.0) < 400.0

    def test_continuous_at_threshold(self):
        assert positivize_rating(400.0 - 1e-9) == pytest.approx(400.0, abs=1e-8)
        slope = (positivize_rating(400.0) - positivize_rating(400.0 - 1e-6)) / 1e-6
        assert slope == pytest.approx(1.0, rel=1e-5)

    def test_round_trip(self):
        rng = random.Random(42)
        samples = [rng.uniform(-10000.0, 5000.0) for _ in range(500)]
        samples += [-10000.0, -400.0, 0.0, 399.999999, 400.0, 4000.0]
        for x in samples:
            assert unpositivize_rating(positivize_rating(x)) == pytest.approx(x, abs=1e-9)

    def test_unpositivize_out_of_domain(self):
        assert unpositivize_rating(0.0) == -math.inf
        assert math.isnan(unpositivize_rating(-5.0))


class TestCalcRequiredPerformance:
    """Tests for the required-performance bisection."""

    def test_first_contest_target(self):
        """With no history, reaching rating r needs performance r + 1200."""
        required = calc_required_performance(800.0, [])
        assert required == pytest.approx(2000.0, abs=1e-6)

    def test_reaches_target_from_single_contest(self):
        target = calc_rating_from_history([2000])
        mid = calc_required_performance(target, [])
        assert abs(calc_rating_from_history([mid]) - target) < 0.01

    def test_underestimates(self, random_histories):
        """The returned value is the lower end, so it never overshoots."""
        for history in random_histories:
            target = calc_rating_from_history(history) + 50.0
            required = calc_required_performance(target, history)
            reached = calc_rating_from_history([required] + history)
            assert reached < target
            assert reached == pytest.approx(target, abs=0.01)

    def test_unreachable_low_target_returns_lower_bound(self):
        assert calc_required_performance(-1e9, [1500.0]) == -10000.0

    def test_unreachable_high_target_approaches_upper_bound(self):
        required = calc_required_performance(1e9, [1500.0])
        assert required == pytest.approx(10000.0)
        assert required <= 10000.0

    def test_custom_bounds(self):
        required = calc_required_performance(800.0, [], lower=0.0, upper=1000.0, iterations=50)
        assert required == pytest.approx(1000.0, abs=1e-9)


class TestGetColor:
    """Tests for rating colors."""

    @pytest.mark.parametrize(
        "rating, color",
        [
            (-5, "unrated"),
            (0, "unrated"),
            (1, "gray"),
            (399.9, "gray"),
            (400, "brown"),
            (1200, "cyan"),
            (2799, "orange"),
            (2800, "red"),
            (3200, "red"),
            (4800, "red"),
            (math.inf, "red"),
            (-math.inf, "unrated"),
            (math.nan, "unrated"),
        ],
    )
    def test_bands(self, rating, color):
        assert get_color(rating) == color

    def test_every_color_reachable(self):
        seen = {get_color(r) for r in range(-400, 3600, 100)}
        assert seen == set(COLOR_NAMES)

    def test_color_bounds(self):
        assert get_color_bounds("gray") == (0.0, 400.0)
        assert get_color_bounds("yellow") == (2000.0, 2400.0)
        assert get_color_bounds("red") == (2800.0, math.inf)

    def test_color_bounds_unknown(self):
        with pytest.raises(KeyError):
            get_color_bounds("unrated")


class TestEstimator:
    """Tests for display-level helpers."""

    def test_estimate_from_history(self):
        estimate = estimate_from_history([1500])
        assert estimate.rating == pytest.approx(300.0)
        assert estimate.display_rating == pytest.approx(400.0 * math.exp(-0.25))
        assert estimate.color == "gray"
        assert estimate.rounded == 312
        assert estimate.rated_matches == 1

    def test_predict_first_contest(self):
        estimate = predict_new_rating(0, 1500, 0)
        assert estimate.rating == 300
        assert estimate.rated_matches == 1

    def test_predict_matches_history(self):
        history = [1900.0, 1700.0, 1500.0]
        before = estimate_from_history(history)
        after = predict_new_rating(before.display_rating, 2100.0, before.rated_matches)
        expected = estimate_from_history([2100.0] + history)
        assert after.rating == pytest.approx(expected.rating, rel=1e-6)
        assert after.color == expected.color
        assert after.rated_matches == 4

    def test_required_performance_for_display(self):
        history = [1500.0, 1400.0, 1600.0]
        required = required_performance_for_display(1600.0, history)
        reached = estimate_from_history([required] + history)
        assert reached.display_rating == pytest.approx(1600.0, abs=0.01)

    def test_repr(self):
        assert "gray" in repr(estimate_from_history([1500]))

    def test_infinite_history_is_red(self):
        estimate = estimate_from_history([math.inf])
        assert estimate.display_rating == math.inf
        assert estimate.color == "red"
