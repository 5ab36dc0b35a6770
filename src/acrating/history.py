"""
Contest result history records.

The contest site publishes each user's results as a JSON list of records
with PascalCase keys:

    {"IsRated": true, "Place": 120, "OldRating": 1480, "NewRating": 1510,
     "Performance": 1702, "InnerPerformance": 1702,
     "ContestScreenName": "abc100.contest.atcoder.jp",
     "ContestName": "AtCoder Beginner Contest 100",
     "EndTime": "2018-06-16T22:40:00+09:00"}

This module turns those records into UserResult objects and extracts the
newest-first performance sequence the rating engine works on. Fetching the
JSON is left to the caller.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class UserResult:
    """
    One contest result of a user.

    Attributes:
        is_rated: Whether the contest counted toward the rating
        place: Final standing
        old_rating: Displayed rating before the contest
        new_rating: Displayed rating after the contest
        performance: Displayed performance
        inner_performance: Performance before the display cap
        contest_screen_name: Contest identifier on the site
        contest_name: Human-readable contest name
        end_time: Contest end time (timezone-aware)
    """
    is_rated: bool
    place: int
    old_rating: int
    new_rating: int
    performance: int
    inner_performance: int
    contest_screen_name: str
    contest_name: str
    end_time: datetime

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "UserResult":
        """
        Build a UserResult from one history JSON record.

        Raises:
            KeyError: If a required key is missing
            ValueError: If EndTime is not an ISO 8601 timestamp
        """
        return cls(
            is_rated=bool(record["IsRated"]),
            place=int(record["Place"]),
            old_rating=int(record["OldRating"]),
            new_rating=int(record["NewRating"]),
            performance=int(record["Performance"]),
            inner_performance=int(record.get("InnerPerformance", record["Performance"])),
            contest_screen_name=record["ContestScreenName"],
            contest_name=record.get("ContestName", record["ContestScreenName"]),
            end_time=parse_end_time(record["EndTime"]),
        )


def parse_end_time(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing 'Z' for UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_history(records: Iterable[Mapping[str, Any]]) -> list[UserResult]:
    """Parse a history JSON list into UserResult objects, keeping input order."""
    return [UserResult.from_dict(record) for record in records]


def get_performance_histories(results: Iterable[UserResult]) -> list[int]:
    """
    Get the performances of rated contests, newest first.

    Unrated participations are dropped. The result can be passed straight
    to calc_rating_from_history.
    """
    only_rated = [r for r in results if r.is_rated]
    only_rated.sort(key=lambda r: r.end_time, reverse=True)
    return [r.performance for r in only_rated]


def count_rated_matches(results: Iterable[UserResult]) -> int:
    """Number of rated contests in a history."""
    return sum(1 for r in results if r.is_rated)
