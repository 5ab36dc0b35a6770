"""
acrating - AtCoder-style rating estimation

Estimates a competitive-programming rating from a history of contest
performances, and works backwards from a target rating to the performance
needed in the next contest.

Main components:
- rating: the numeric rating engine (history aggregate, incremental update,
  positivize transform, required-performance solver, colors)
- history: contest result records and performance sequence extraction
- cache: per-user memoization of fetched histories
- contest: contest information text parsing (rated range, penalty)
"""

__version__ = "1.0.0"
