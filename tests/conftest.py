"""
Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides
shared fixtures for all tests.
"""

import random

import pytest


@pytest.fixture
def history_records():
    """
    A small user history in the contest site's JSON format.

    Deliberately out of chronological order, with one unrated entry.
    """
    return [
        {
            "IsRated": True,
            "Place": 812,
            "OldRating": 0,
            "NewRating": 311,
            "Performance": 1500,
            "InnerPerformance": 1500,
            "ContestScreenName": "abc100.contest.atcoder.jp",
            "ContestName": "AtCoder Beginner Contest 100",
            "EndTime": "2018-06-16T22:40:00+09:00",
        },
        {
            "IsRated": True,
            "Place": 95,
            "OldRating": 640,
            "NewRating": 1012,
            "Performance": 1900,
            "InnerPerformance": 1900,
            "ContestScreenName": "abc102.contest.atcoder.jp",
            "ContestName": "AtCoder Beginner Contest 102",
            "EndTime": "2018-07-01T22:40:00+09:00",
        },
        {
            "IsRated": False,
            "Place": 30,
            "OldRating": 1012,
            "NewRating": 1012,
            "Performance": 2400,
            "InnerPerformance": 2400,
            "ContestScreenName": "arc100.contest.atcoder.jp",
            "ContestName": "AtCoder Regular Contest 100",
            "EndTime": "2018-07-08T22:40:00+09:00",
        },
        {
            "IsRated": True,
            "Place": 340,
            "OldRating": 311,
            "NewRating": 640,
            "Performance": 1700,
            "InnerPerformance": 1700,
            "ContestScreenName": "abc101.contest.atcoder.jp",
            "ContestName": "AtCoder Beginner Contest 101",
            "EndTime": "2018-06-23T22:40:00+09:00",
        },
    ]


@pytest.fixture
def random_histories():
    """Seeded pseudo-random newest-first histories of varying length."""
    rng = random.Random(20171024)
    histories = []
    for length in (1, 2, 3, 5, 10, 25, 60):
        histories.append([rng.uniform(-500.0, 3500.0) for _ in range(length)])
    return histories
