"""Allocation strategy implementations."""

from .base import AllocationStrategy, validate_problem
from .greedy import GreedyStrategy
from .linear_program import LinearProgramStrategy, build_dividend_program, solve

__all__ = [
    "AllocationStrategy",
    "GreedyStrategy",
    "LinearProgramStrategy",
    "build_dividend_program",
    "solve",
    "validate_problem",
]
