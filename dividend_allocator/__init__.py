"""
Dividend Allocator - Choose share quantities that maximize dividend income.

Exports:
    Security: Dataclass representing a dividend-paying security
    Position: Dataclass representing the solved holding of one security
    Allocation: Dataclass holding the optimal positions and dividend income
    Portfolio: Main class for managing securities and allocating a budget
    AllocationStrategy: Abstract base class for allocation strategies
    LinearProgramStrategy: Exact LP allocation via HiGHS (default)
    GreedyStrategy: Dividend-per-dollar ranking, no solver
    solve: Functional entry point returning (objective_value, shares)
"""

from .config import AllocationDefaults, SolverConfig
from .exceptions import (
    AllocationError,
    InfeasibleError,
    InvalidInputError,
    SolverError,
    SolverFailureError,
    UnboundedError,
)
from .models import Allocation, Position, Security
from .portfolio import Portfolio
from .optimizers import (
    AllocationStrategy,
    GreedyStrategy,
    LinearProgramStrategy,
    solve,
)

__all__ = [
    "AllocationDefaults",
    "SolverConfig",
    "AllocationError",
    "InfeasibleError",
    "InvalidInputError",
    "SolverError",
    "SolverFailureError",
    "UnboundedError",
    "Security",
    "Position",
    "Allocation",
    "Portfolio",
    "AllocationStrategy",
    "GreedyStrategy",
    "LinearProgramStrategy",
    "solve",
]
