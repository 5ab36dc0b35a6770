"""
Contest information text parsing.

A contest's top page shows a short block of "label: value" lines:

    Can Participate: All
    Rated Range: ~ 1999
    Penalty: 5 minutes

(or the Japanese equivalents, e.g. "ペナルティ: 5 分"). This module parses
the text of those lines into a ContestInformation. Extracting the lines
from the page markup is left to the caller.

Range formats:
- "All"            -> (0, inf)
- "1200 ~ 2799"    -> (1200, 2799)
- "~ 1999"         -> (0, 1999)
- "2000 ~"         -> (2000, inf)
- "-" or no "~"    -> (0, -1), an empty range

Durations are returned in milliseconds ("None"/"なし" -> 0, unparseable -> NaN).
"""

import math
import re
from dataclasses import dataclass
from typing import Iterable


class ContestInfoParseError(ValueError):
    """Raised when contest information text cannot be parsed."""
    pass


MS_PER_SECOND = 1000.0

# Milliseconds per unit; a month is taken as 30 days
_UNIT_MS = {
    "second": MS_PER_SECOND,
    "minute": 60 * MS_PER_SECOND,
    "hour": 60 * 60 * MS_PER_SECOND,
    "day": 24 * 60 * 60 * MS_PER_SECOND,
    "month": 30 * 24 * 60 * 60 * MS_PER_SECOND,
}

# Japanese and abbreviated unit names -> canonical unit
_UNIT_ALIASES = {
    "ヶ月": "month",
    "か月": "month",
    "日": "day",
    "時間": "hour",
    "分": "minute",
    "秒": "second",
    "min": "minute",
    "mins": "minute",
    "sec": "second",
    "secs": "second",
}

_NO_PENALTY = {"None", "なし"}

_DURATION_PART_RE = re.compile(r"(\d+)([^\d]+)")
_LEADING_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class ContestInformation:
    """
    Rating-relevant settings of a contest.

    Attributes:
        participatable_range: (low, high) display ratings allowed to enter
        rated_range: (low, high) display ratings for which the contest is rated
        penalty: Penalty per wrong submission in milliseconds (NaN if unknown)
    """
    participatable_range: tuple[float, float]
    rated_range: tuple[float, float]
    penalty: float

    def can_participate(self, rating: float) -> bool:
        """Whether a user with this display rating may enter."""
        low, high = self.participatable_range
        return low <= rating <= high

    def is_rated_for(self, rating: float) -> bool:
        """Whether the contest is rated for a user with this display rating."""
        low, high = self.rated_range
        return low <= rating <= high

    def __repr__(self) -> str:
        return (
            f"<ContestInformation(participatable={self.participatable_range}, "
            f"rated={self.rated_range}, penalty_ms={self.penalty})>"
        )


def _parse_leading_int(s: str) -> float | None:
    match = _LEADING_INT_RE.match(s.strip())
    if match is None:
        return None
    return float(int(match.group()))


def parse_range_string(s: str) -> tuple[float, float]:
    """
    Parse a rating range string such as "1200 ~ 2799".

    Examples:
        parse_range_string("All")       # → (0.0, inf)
        parse_range_string("~ 1999")    # → (0.0, 1999.0)
        parse_range_string("-")         # → (0.0, -1.0)
    """
    s = s.strip()
    if s == "All":
        return 0.0, math.inf
    if "~" not in s:
        return 0.0, -1.0

    low_text, high_text = s.split("~", 1)
    low = _parse_leading_int(low_text)
    high = _parse_leading_int(high_text)
    return (
        low if low is not None else 0.0,
        high if high is not None else math.inf,
    )


def parse_duration_string(s: str) -> float:
    """
    Parse a duration such as "5 minutes", "5分" or "1時間30分".

    Returns:
        Duration in milliseconds, 0.0 for "None"/"なし", NaN if the
        string contains no number-unit pair

    Raises:
        ContestInfoParseError: If a unit is not recognised
    """
    s = s.strip()
    if s in _NO_PENALTY:
        return 0.0

    parts = _DURATION_PART_RE.findall(s)
    if not parts:
        return math.nan

    total = 0.0
    for number, raw_unit in parts:
        unit = raw_unit.strip().lower()
        unit = _UNIT_ALIASES.get(unit, unit)
        if unit.endswith("s") and unit[:-1] in _UNIT_MS:
            unit = unit[:-1]
        if unit not in _UNIT_MS:
            raise ContestInfoParseError(f"Unknown duration unit '{raw_unit.strip()}' in '{s}'")
        total += int(number) * _UNIT_MS[unit]
    return total


def parse_contest_information(lines: Iterable[str]) -> ContestInformation:
    """
    Parse the "label: value" lines of a contest's information block.

    The first three lines are, in order: participatable range, rated range
    and penalty. Labels are ignored so both languages work.

    Raises:
        ContestInfoParseError: If there are fewer than three lines or a
                               line has no ':' separator
    """
    values = []
    for line in lines:
        if ":" not in line:
            raise ContestInfoParseError(f"Expected 'label: value', got '{line}'")
        values.append(line.split(":", 1)[1].strip())

    if len(values) < 3:
        raise ContestInfoParseError(
            f"Expected at least 3 information lines, got {len(values)}"
        )

    return ContestInformation(
        participatable_range=parse_range_string(values[0]),
        rated_range=parse_range_string(values[1]),
        penalty=parse_duration_string(values[2]),
    )
