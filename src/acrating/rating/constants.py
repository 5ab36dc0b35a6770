"""
Rating engine constants.

The rating is a discounted average of past performances in log2 space:
each contest counts with weight 0.9^k, where k is the number of contests
that happened after it. A correction term shrinks the rating of users with
few rated contests, using the 0.81 (= 0.9^2) series for the variance.

PERFORMANCE_SCALE: performances are averaged as 2^(perf / 800)
CORRECTION_SCALE: correction for a single rated contest (f(1) = 1200)
FINF_SAMPLES: history length used to approximate an infinite history
"""

# Per-contest decay of older performances
DECAY = 0.9

# DECAY squared, used by the variance side of the correction
SQUARED_DECAY = 0.81

PERFORMANCE_SCALE = 800.0

CORRECTION_SCALE = 1200.0

FINF_SAMPLES = 400

# Below this, display ratings are compressed toward 0 instead of clipped
POSITIVIZE_THRESHOLD = 400.0

# Width of one color band on the display rating
COLOR_BAND_WIDTH = 400

COLOR_NAMES = [
    "unrated",
    "gray",
    "brown",
    "green",
    "cyan",
    "blue",
    "yellow",
    "orange",
    "red",
]

# Lower bound of each color band (display rating)
COLOR_BOUNDS = {
    "gray": 0,
    "brown": 400,
    "green": 800,
    "cyan": 1200,
    "blue": 1600,
    "yellow": 2000,
    "orange": 2400,
    "red": 2800,
}

# Default parameters for the required-performance bisection
# lower/upper: search range for the next performance
# iterations: fixed number of halvings (no convergence threshold)
SEARCH_DEFAULTS = {
    "lower": -10000.0,
    "upper": 10000.0,
    "iterations": 100,
}
