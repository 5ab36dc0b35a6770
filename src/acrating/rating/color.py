"""Rating color classification on 400-point bands of the display rating."""

import math

from acrating.rating.constants import COLOR_BAND_WIDTH, COLOR_BOUNDS, COLOR_NAMES


def get_color(rating: float) -> str:
    """
    Get the color name for a positivized (display) rating.

    Ratings of 0 or below map to "unrated"; 2800 and above are "red".

    Examples:
        get_color(399)   # → "gray"
        get_color(400)   # → "brown"
        get_color(3200)  # → "red"
    """
    if rating >= COLOR_BOUNDS[COLOR_NAMES[-1]]:
        # Top band is open-ended, including inf
        color_index = len(COLOR_NAMES) - 1
    elif rating > 0:
        color_index = min(math.floor(rating / COLOR_BAND_WIDTH) + 1, len(COLOR_NAMES) - 1)
    else:
        color_index = 0
    return COLOR_NAMES[color_index]


def get_color_bounds(color: str) -> tuple[float, float]:
    """
    Get the display rating range [lower, upper) of a color.

    Raises:
        KeyError: If color is not a rated color name
    """
    lower = COLOR_BOUNDS[color]
    index = COLOR_NAMES.index(color)
    if index + 1 < len(COLOR_NAMES):
        upper = COLOR_BOUNDS[COLOR_NAMES[index + 1]]
    else:
        upper = math.inf
    return float(lower), float(upper)
